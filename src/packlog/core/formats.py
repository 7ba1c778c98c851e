# topmark:header:start
#
#   project      : PackLog
#   file         : formats.py
#   file_relpath : src/packlog/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the ``decode``, ``version`` and ``dump-config`` commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How decoded events (or a summary) are written.

    Attributes:
        TEXT: One human line per event, colored when enabled.
        MARKDOWN: A Markdown table (or per-build sections when aggregating).
        JSON: One document written after end of input.
        NDJSON: One JSON record per event, written as soon as it is decoded.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
    NDJSON = "ndjson"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for JSON and NDJSON, which are never colored."""
    return fmt in (OutputFormat.JSON, OutputFormat.NDJSON)
