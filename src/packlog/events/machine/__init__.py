# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/events/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable output for decoded events.

Layers:

- **payloads**: per-event payloads (no ``meta``/``kind``, no serialization).
- **shapes**: JSON envelopes and NDJSON records around those payloads.
- **serializers**: pure JSON/NDJSON string builders (no printing).

See `packlog.core.machine` for the shared primitives.
"""

from __future__ import annotations

from packlog.events.machine.serializers import (
    serialize_event_ndjson,
    serialize_events_json,
    serialize_summary,
)

__all__ = [
    "serialize_event_ndjson",
    "serialize_events_json",
    "serialize_summary",
]
