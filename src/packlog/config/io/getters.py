# topmark:header:start
#
#   project      : PackLog
#   file         : getters.py
#   file_relpath : src/packlog/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Every getter validates the expected shape and, on mismatch, records a
**warning** in a `DiagnosticLog` (and also logs it), then falls back to "unset".
User mistakes in config files are surfaced without crashing or changing the
defaulting behavior.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from .guards import is_any_list

if TYPE_CHECKING:
    from packlog.config.logging import PacklogLogger
    from packlog.core.diagnostics import DiagnosticLog

    from .guards import TomlTable

E = TypeVar("E", bound=Enum)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: PacklogLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: PacklogLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are **not** coerced.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: PacklogLogger,
) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Behavior:
        - If the key is missing, returns None.
        - If the value is not a list, records a warning and returns None.
        - Non-string items are dropped, each with a warning.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[filter]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (PacklogLogger): Logger for emitting warnings.

    Returns:
        list[str] | None: Filtered list containing only string entries, or None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not is_any_list(value):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: PacklogLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    try:
        return enum_cls(raw)
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None


def check_unknown_keys(
    table: TomlTable,
    allowed: dict[str, frozenset[str]],
    *,
    diagnostics: DiagnosticLog,
    logger: PacklogLogger,
) -> None:
    """Record a warning for every section or key outside ``allowed``.

    Args:
        table (TomlTable): The top-level PackLog table.
        allowed (dict[str, frozenset[str]]): Known keys, per known section.
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (PacklogLogger): Logger for emitting warnings.
    """
    for section, body in table.items():
        if section not in allowed:
            logger.warning("Ignoring unknown config section [%s]", section)
            diagnostics.add_warning(f"Ignoring unknown config section [{section}]")
            continue
        if not isinstance(body, dict):
            logger.warning("Expected table for [%s], got %s", section, type(body).__name__)
            diagnostics.add_warning(f"Expected table for [{section}], got {type(body).__name__}")
            continue
        for key in body:
            if key not in allowed[section]:
                logger.warning("Ignoring unknown key in [%s]: %s", section, key)
                diagnostics.add_warning(f"Ignoring unknown key in [{section}]: {key}")
