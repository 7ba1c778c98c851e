# topmark:header:start
#
#   project      : PackLog
#   file         : loaders.py
#   file_relpath : src/packlog/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides helpers for reading PackLog configuration from:
- the runtime defaults (defined in code), and
- on-disk TOML files (`packlog.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from packlog.config.keys import Toml
from packlog.config.logging import get_logger
from packlog.core.formats import OutputFormat
from packlog.decoder.tokens import DEFAULT_DELIMITER

if TYPE_CHECKING:
    from pathlib import Path

    from packlog.config.logging import PacklogLogger

    from .guards import TomlTable

logger: PacklogLogger = get_logger(__name__)


class TomlLoadError(Exception):
    """A TOML file could not be read or parsed.

    Attributes:
        path (Path): The offending file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config file {path}: {reason}")
        self.path = path


def load_defaults_dict() -> TomlTable:
    """Return PackLog's **runtime defaults** as a Python dict.

    This function performs **no I/O**. Sections/keys align with
    `packlog.config.keys.Toml`.

    Returns:
        A new TOML-table-compatible dict, safe for callers to mutate.
    """
    return {
        Toml.SECTION_INPUT: {
            Toml.KEY_DELIMITER: DEFAULT_DELIMITER,
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_FORMAT: OutputFormat.TEXT.value,
            Toml.KEY_AGGREGATE: False,
        },
        Toml.SECTION_FILTER: {
            # Empty means "every category".
            Toml.KEY_EVENTS: [],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``packlog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        TomlLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise TomlLoadError(path, str(e)) from e
    except (TomlkitParseError, UnicodeDecodeError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise TomlLoadError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
