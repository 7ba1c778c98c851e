# topmark:header:start
#
#   project      : PackLog
#   file         : keys.py
#   file_relpath : src/packlog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PackLog configuration.

This module defines the authoritative string constants used when reading,
writing, and validating PackLog configuration from TOML sources
(``packlog.toml`` and ``[tool.packlog]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PackLog configuration.

    The ordering of constants mirrors the layout produced by ``packlog dump-config``.
    """

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_PACKLOG: Final[str] = "packlog"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_DELIMITER: Final[str] = "delimiter"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"
    KEY_AGGREGATE: Final[str] = "aggregate"

    # [filter]
    SECTION_FILTER: Final[str] = "filter"

    KEY_EVENTS: Final[str] = "events"

    # Provenance (dump only; never read back)
    KEY_CONFIG_FILES: Final[str] = "config_files"

    ALLOWED_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_INPUT: frozenset({KEY_DELIMITER}),
        SECTION_OUTPUT: frozenset({KEY_FORMAT, KEY_AGGREGATE}),
        SECTION_FILTER: frozenset({KEY_EVENTS}),
    }
