# topmark:header:start
#
#   project      : PackLog
#   file         : serializers.py
#   file_relpath : src/packlog/events/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON/NDJSON serialization of decoded events and summaries.

Pure functions: they return strings and never print.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.core.formats import OutputFormat
from packlog.core.machine.serializers import serialize_json_object, serialize_ndjson_record
from packlog.events.machine.shapes import (
    build_event_ndjson_record,
    build_events_json_envelope,
    build_summary_json_envelope,
    build_summary_ndjson_record,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packlog.core.machine.schemas import MetaPayload
    from packlog.events.aggregate import LogSummary
    from packlog.events.model import Event


def serialize_event_ndjson(*, meta: MetaPayload, event: Event) -> str:
    """Serialize one event as a single NDJSON line (no trailing newline)."""
    return serialize_ndjson_record(build_event_ndjson_record(meta=meta, event=event))


def serialize_events_json(*, meta: MetaPayload, events: Iterable[Event]) -> str:
    """Serialize a complete event list as one pretty-printed JSON document."""
    return serialize_json_object(build_events_json_envelope(meta=meta, events=events))


def serialize_summary(*, meta: MetaPayload, summary: LogSummary, fmt: OutputFormat) -> str:
    """Serialize an aggregated summary.

    Args:
        meta: Metadata payload (tool/version).
        summary: The aggregated summary.
        fmt: ``JSON`` (envelope) or ``NDJSON`` (single ``summary`` record).

    Returns:
        The serialized document (no trailing newline).

    Raises:
        ValueError: If `fmt` is not JSON or NDJSON.
    """
    if fmt == OutputFormat.JSON:
        return serialize_json_object(build_summary_json_envelope(meta=meta, summary=summary))
    if fmt == OutputFormat.NDJSON:
        return serialize_ndjson_record(build_summary_ndjson_record(meta=meta, summary=summary))
    raise ValueError(f"Unsupported machine output format: {fmt!r}")
