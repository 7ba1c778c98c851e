# topmark:header:start
#
#   project      : PackLog
#   file         : stream.py
#   file_relpath : src/packlog/decoder/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drive an `EventLog` over an iterable of raw lines.

`iter_events` turns the callback-based decoder into a generator: events are
yielded in emission order as soon as the line that produced them has been
decoded. Decode errors are annotated with the failing line before they
propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.config.logging import get_logger
from packlog.decoder.errors import DecodeError
from packlog.decoder.log import EventLog
from packlog.decoder.tokens import DEFAULT_DELIMITER, TokenStream, split_line

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from packlog.config.logging import PacklogLogger
    from packlog.events.model import Event

logger: PacklogLogger = get_logger(__name__)


def iter_events(
    lines: Iterable[str],
    *,
    delimiter: str = DEFAULT_DELIMITER,
    log: EventLog | None = None,
) -> Iterator[Event]:
    """Decode ``lines`` and yield the resulting events.

    Blank lines are skipped. The line counter still advances over them, so
    reported line numbers match the input.

    Args:
        lines (Iterable[str]): Raw input lines (terminators optional).
        delimiter (str): Token separator.
        log (EventLog | None): Decoder to feed; a fresh one when ``None``. Pass
            your own to inspect ``incomplete_builds()`` once the input is exhausted.

    Yields:
        Event: Events in the order the decoder emitted them.

    Raises:
        DecodeError: On the first malformed line, with ``line_no`` and ``line`` set.
    """
    event_log: EventLog = log if log is not None else EventLog()
    pending: list[Event] = []

    for line_no, raw in enumerate(lines, start=1):
        line: str = raw.rstrip("\r\n")
        if not line:
            continue
        try:
            event_log.try_decode(TokenStream(split_line(line, delimiter)), pending.append)
        except DecodeError as exc:
            exc.line_no = line_no
            exc.line = line
            logger.debug("decode failed at line %d: %s", line_no, exc.message)
            raise
        yield from pending
        pending.clear()

    logger.debug("input exhausted; %d build(s) seen", len(event_log))


def decode_events(
    lines: Iterable[str],
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> list[Event]:
    """Eagerly decode ``lines`` and return every event (see `iter_events`)."""
    return list(iter_events(lines, delimiter=delimiter))
