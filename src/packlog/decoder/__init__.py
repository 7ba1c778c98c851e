# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/decoder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental decoder for machine-readable build logs.

The decoder is layered the same way the log format is nested:

- `packlog.decoder.tokens`: line splitting and the `TokenStream` cursor.
- `packlog.decoder.artifact`: one artifact, described over several lines.
- `packlog.decoder.build`: one build, a fixed number of artifact slots.
- `packlog.decoder.log`: the whole log, routing lines to builds by name.
- `packlog.decoder.stream`: line-iterator front end (`iter_events`).

Each layer exposes ``try_decode(tokens, callback) -> Decoding`` and reports
completed values through its callback.
"""

from __future__ import annotations

from packlog.decoder.artifact import ArtifactDecoder
from packlog.decoder.build import BuildDecoder
from packlog.decoder.errors import (
    DecodeError,
    DecoderFinishedError,
    IncompleteStateError,
    MalformedTokenError,
    MissingTokenError,
    UnexpectedTokenError,
    UnknownMessageError,
)
from packlog.decoder.log import EventLog
from packlog.decoder.stream import decode_events, iter_events
from packlog.decoder.tokens import DEFAULT_DELIMITER, Decoding, TokenStream

__all__ = [
    "DEFAULT_DELIMITER",
    "ArtifactDecoder",
    "BuildDecoder",
    "DecodeError",
    "DecoderFinishedError",
    "Decoding",
    "EventLog",
    "IncompleteStateError",
    "MalformedTokenError",
    "MissingTokenError",
    "TokenStream",
    "UnexpectedTokenError",
    "UnknownMessageError",
    "decode_events",
    "iter_events",
]
