# topmark:header:start
#
#   project      : PackLog
#   file         : serializers.py
#   file_relpath : src/packlog/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure JSON/NDJSON serialization utilities for machine output.

This module converts *already-shaped* machine output objects (envelopes or NDJSON
record mappings) into strings. It never prints.

Conventions:
- `json.dumps()` does not append a trailing newline.
- NDJSON lines are yielded one record at a time, without terminators.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from packlog.core.machine.schemas import normalize_payload
from packlog.core.machine.shapes import build_json_envelope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from packlog.core.machine.schemas import MetaPayload


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline)."""
    return json.dumps(normalize_payload(obj), indent=2)


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope with `meta` plus named payloads.

    Args:
        meta: Metadata payload (tool/version).
        **payloads: Named payload objects. Each value may be a dict-like object or
            an object exposing `to_dict()`.

    Returns:
        Pretty-printed JSON string (no trailing newline).
    """
    return serialize_json_object(build_json_envelope(meta=meta, **payloads))


def serialize_ndjson_record(record: Mapping[str, object]) -> str:
    """Serialize one shaped NDJSON record to a single line (no trailing newline)."""
    return json.dumps(record)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize shaped NDJSON records into per-line JSON strings.

    Args:
        records: Shaped NDJSON record mappings (each already carrying ``kind``/``meta``).

    Yields:
        One JSON string per record (no trailing newline).
    """
    for record in records:
        yield serialize_ndjson_record(record)
