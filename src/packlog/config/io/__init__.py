# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for PackLog configuration.

This package centralizes **pure** helpers for reading, validating, and writing
TOML used by PackLog's configuration layer. PackLog uses `tomlkit` for both
parsing and rendering.

Typical flow:
    1. Load defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Read values with the checked getters, recording diagnostics.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    check_unknown_keys,
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
)
from .guards import TomlTable, get_table_value, is_any_list
from .loaders import TomlLoadError, load_defaults_dict, load_toml_dict
from .render import to_toml

__all__: list[str] = [
    "TomlLoadError",
    "TomlTable",
    "check_unknown_keys",
    "get_bool_value_or_none_checked",
    "get_enum_value_checked",
    "get_string_list_value_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_any_list",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
