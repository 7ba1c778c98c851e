# topmark:header:start
#
#   project      : PackLog
#   file         : config_resolver.py
#   file_relpath : src/packlog/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for resolving the PackLog configuration from Click parameters.

This module bridges CLI parsing and `packlog.config.model`: it merges the
runtime defaults, the discovered project file, explicit ``--config`` files and
the command-line overrides into one immutable `Config`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from packlog.cli.errors import PacklogConfigError, PacklogUsageError
from packlog.config.io import TomlLoadError
from packlog.config.logging import get_logger
from packlog.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from packlog.config.logging import PacklogLogger
    from packlog.config.model import Config
    from packlog.core.formats import OutputFormat
    from packlog.events.model import EventCategory

logger: PacklogLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: Iterable[str],
    delimiter: str | None = None,
    output_format: OutputFormat | None = None,
    aggregate: bool | None = None,
    events: Iterable[EventCategory] = (),
    cwd: Path | None = None,
) -> Config:
    """Build the effective `Config` from Click parameters.

    Resolution order (lowest → highest precedence):
      1. Runtime defaults.
      2. ``packlog.toml`` in the working directory, else the ``[tool.packlog]``
         table of ``pyproject.toml`` (skipped with ``--no-config``).
      3. Explicit ``--config`` files, merged in order.
      4. CLI overrides.

    Args:
        no_config (bool): If True, skip project-file discovery.
        config_paths (Iterable[str]): Extra config TOML file paths to merge.
        delimiter (str | None): ``--delimiter`` override.
        output_format (OutputFormat | None): ``--format`` override.
        aggregate (bool | None): ``--aggregate/--no-aggregate`` override.
        events (Iterable[EventCategory]): ``--filter`` values; empty leaves the
            configured filter in place.
        cwd (Path | None): Discovery directory; the process CWD when None.

    Returns:
        Config: The frozen configuration.

    Raises:
        PacklogConfigError: If a config file cannot be read or parsed.
        PacklogUsageError: If ``--delimiter`` is not a single character.
    """
    if delimiter is not None and len(delimiter) != 1:
        raise PacklogUsageError(f"--delimiter must be a single character, got {delimiter!r}")

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=list(config_paths),
            no_config=no_config,
            cwd=cwd,
        )
    except TomlLoadError as exc:
        logger.error("%s", exc)
        raise PacklogConfigError(str(exc)) from exc

    args: dict[str, Any] = {
        "delimiter": delimiter,
        "output_format": output_format,
        "aggregate": aggregate,
        "events": list(events),
    }
    logger.trace("CLI overrides: %s", args)
    return draft.apply_cli_args(args).freeze()
