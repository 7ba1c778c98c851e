# topmark:header:start
#
#   project      : PackLog
#   file         : schemas.py
#   file_relpath : src/packlog/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for PackLog machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- the metadata payload type (`MetaPayload`)
- payload normalization (`normalize_payload`)

Normalization rules:
- `Path` -> `str`
- `Enum` -> `Enum.value`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences/sets -> lists of normalized values
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final, TypedDict, cast

from packlog.constants import PACKLOG_TOOL_NAME, PACKLOG_VERSION


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    # standard payload container keys
    EVENTS: Final[str] = "events"
    SUMMARY: Final[str] = "summary"
    CONFIG: Final[str] = "config"
    CONFIG_DIAGNOSTICS: Final[str] = "config_diagnostics"

    # Version
    VERSION: Final[str] = "version"
    VERSION_INFO: Final[str] = "version_info"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    MESSAGE: Final[str] = "message"
    ARTIFACT: Final[str] = "artifact"
    BUILD: Final[str] = "build"
    SUMMARY: Final[str] = "summary"
    CONFIG: Final[str] = "config"
    DIAGNOSTIC: Final[str] = "diagnostic"
    VERSION: Final[str] = "version"


_KNOWN_KINDS: Final[frozenset[str]] = frozenset(
    {
        MachineKind.MESSAGE,
        MachineKind.ARTIFACT,
        MachineKind.BUILD,
        MachineKind.SUMMARY,
        MachineKind.CONFIG,
        MachineKind.DIAGNOSTIC,
        MachineKind.VERSION,
    }
)


class MetaPayload(TypedDict):
    """Metadata describing the PackLog runtime for machine output."""

    tool: str
    version: str


def validate_machine_kind(kind: str) -> None:
    """Validate that `kind` is a known machine record kind.

    Raises:
        ValueError: If ``kind`` is empty or unknown.
    """
    if not kind:
        raise ValueError("machine kind must be a non-empty string")
    if kind not in _KNOWN_KINDS:
        raise ValueError(
            f"Unknown machine kind '{kind}' - valid choices: {', '.join(sorted(_KNOWN_KINDS))}"
        )


def normalize_payload(obj: object) -> object:
    """Normalize a machine-output payload into JSON-serializable structures.

    Payload objects should implement `to_dict()` if they want custom
    serialization; arbitrary dataclasses are not converted. Keys in mappings are
    stringified to keep JSON object keys valid.

    Args:
        obj (object): The machine-output payload.

    Returns:
        object: The JSON-serializable representation of the payload.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.value

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def build_meta_payload() -> MetaPayload:
    """Build a small metadata payload with tool name and version."""
    return {"tool": PACKLOG_TOOL_NAME, "version": PACKLOG_VERSION}
