# topmark:header:start
#
#   project      : PackLog
#   file         : render.py
#   file_relpath : src/packlog/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the effective configuration as a TOML document (``dump-config``)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

import tomlkit

if TYPE_CHECKING:
    from tomlkit import TOMLDocument

    from .guards import TomlTable


def _without_none(value: object) -> object:
    # TOML has no null
    if isinstance(value, Mapping):
        mapping: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _without_none(v) for k, v in mapping.items() if v is not None}
    if isinstance(value, list):
        items: list[object] = cast("list[object]", value)
        return [_without_none(v) for v in items if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a config mapping to TOML text.

    Top-level scalars and arrays are written before any table, whatever their
    order in ``toml_dict``, and ``None`` values are dropped.

    Args:
        toml_dict (TomlTable): Mapping as returned by `Config.to_toml_dict`.

    Returns:
        str: The rendered document.
    """
    cleaned: TomlTable = cast("TomlTable", _without_none(toml_dict))
    doc: TOMLDocument = tomlkit.document()
    for key, value in sorted(cleaned.items(), key=lambda kv: isinstance(kv[1], dict)):
        doc.add(key, value)
    return doc.as_string()
