# topmark:header:start
#
#   project      : PackLog
#   file         : shapes.py
#   file_relpath : src/packlog/core/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dict shapes shared by every PackLog machine output.

A JSON document is ``{"meta": {...}, <name>: <payload>, ...}``; an NDJSON line
is ``{"kind": <kind>, "meta": {...}, <kind or container key>: <payload>}``.
Payloads are normalized here; turning shapes into text is left to
`packlog.core.machine.serializers`.
"""

from __future__ import annotations

from packlog.core.machine.schemas import (
    MachineKey,
    MetaPayload,
    normalize_payload,
    validate_machine_kind,
)


def build_json_envelope(*, meta: MetaPayload, **payloads: object) -> dict[str, object]:
    """Return ``{"meta": meta, **payloads}`` with every payload normalized."""
    envelope: dict[str, object] = {MachineKey.META: dict(meta)}
    envelope.update({name: normalize_payload(p) for name, p in payloads.items()})
    return envelope


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    container_key: str | None = None,
    payload: object,
) -> dict[str, object]:
    """Return one NDJSON record.

    Args:
        kind: Record kind (a `MachineKind` value).
        meta: Tool and version metadata.
        container_key: Key holding the payload; ``kind`` when omitted.
        payload: A mapping, or an object with ``to_dict()``.

    Raises:
        ValueError: If ``kind`` is not a `MachineKind` value.
    """
    validate_machine_kind(kind)
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        container_key or kind: normalize_payload(payload),
    }
