# topmark:header:start
#
#   project      : PackLog
#   file         : guards.py
#   file_relpath : src/packlog/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Narrowing helpers for values parsed from TOML."""

from __future__ import annotations

from typing import Any, TypeGuard, cast

TomlTable = dict[str, Any]


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``.

    A missing key, or a value that is not a table (``input = 3``), yields a new
    empty table so section lookups never fail.
    """
    value: object = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}
