# topmark:header:start
#
#   project      : PackLog
#   file         : shapes.py
#   file_relpath : src/packlog/events/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope and record shapes for decoded events.

NDJSON convention: every record includes ``kind`` and ``meta``, and the payload
container key equals ``kind``:

    {"kind": "artifact", "meta": {...}, "artifact": {"timestamp": ..., ...}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.core.machine.schemas import MachineKey, MachineKind
from packlog.core.machine.shapes import build_json_envelope, build_ndjson_record
from packlog.events.machine.payloads import (
    build_event_list_item,
    build_event_payload,
    event_machine_kind,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packlog.core.machine.schemas import MetaPayload
    from packlog.events.aggregate import LogSummary
    from packlog.events.model import Event


def build_event_ndjson_record(*, meta: MetaPayload, event: Event) -> dict[str, object]:
    """Build the NDJSON record for one event."""
    return build_ndjson_record(
        kind=event_machine_kind(event),
        meta=meta,
        payload=build_event_payload(event),
    )


def build_summary_ndjson_record(*, meta: MetaPayload, summary: LogSummary) -> dict[str, object]:
    """Build the NDJSON record for an aggregated summary."""
    return build_ndjson_record(kind=MachineKind.SUMMARY, meta=meta, payload=summary)


def build_events_json_envelope(
    *,
    meta: MetaPayload,
    events: Iterable[Event],
) -> dict[str, object]:
    """Build the JSON envelope ``{"meta": ..., "events": [...]}``."""
    return build_json_envelope(
        meta=meta,
        **{MachineKey.EVENTS: [build_event_list_item(e) for e in events]},
    )


def build_summary_json_envelope(*, meta: MetaPayload, summary: LogSummary) -> dict[str, object]:
    """Build the JSON envelope ``{"meta": ..., "summary": {...}}``."""
    return build_json_envelope(meta=meta, **{MachineKey.SUMMARY: summary})
