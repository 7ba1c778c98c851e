# topmark:header:start
#
#   project      : PackLog
#   file         : payloads.py
#   file_relpath : src/packlog/events/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders for decoded events.

"Payload" here means the *domain object* inserted into a JSON envelope or an
NDJSON record: no ``meta``, no serialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.core.machine.schemas import MachineKey, MachineKind, normalize_payload
from packlog.events.model import ArtifactEvent, BuildEvent, UiEvent

if TYPE_CHECKING:
    from packlog.events.model import Event


def event_machine_kind(event: Event) -> str:
    """Return the NDJSON record kind for ``event``."""
    match event.kind:
        case UiEvent():
            return MachineKind.MESSAGE
        case ArtifactEvent():
            return MachineKind.ARTIFACT
        case BuildEvent():
            return MachineKind.BUILD


def build_event_payload(event: Event) -> dict[str, object]:
    """Build the payload for one event (``timestamp`` plus the kind's fields)."""
    return {str(k): normalize_payload(v) for k, v in event.to_dict().items()}


def build_event_list_item(event: Event) -> dict[str, object]:
    """Build one element of the JSON ``events`` array (the payload tagged with its kind)."""
    return {MachineKey.KIND: event_machine_kind(event), **build_event_payload(event)}
