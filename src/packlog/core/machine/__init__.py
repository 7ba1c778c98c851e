# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Core machine-output infrastructure.

Separation of concerns:

1) Schema primitives (keys/kinds + normalization):
   `packlog.core.machine.schemas`.
2) Payload builders (domain data only; no envelope/kind/meta):
   `packlog.<domain>.machine.payloads`.
3) Shape builders (envelopes and NDJSON records; still not serialized):
   `packlog.core.machine.shapes`.
4) Serialization (turn shapes into strings; no printing):
   `packlog.core.machine.serializers`.
5) CLI emission (printing to `ConsoleLike`): lives under `packlog.cli`.
"""

from __future__ import annotations
