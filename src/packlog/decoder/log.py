# topmark:header:start
#
#   project      : PackLog
#   file         : log.py
#   file_relpath : src/packlog/decoder/log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream-level dispatcher for build-log lines.

Every line starts with ``<timestamp>,<build name>``. An empty build name marks a
*global* line (a UI notice emitted immediately); any other name routes the rest
of the line to that build's `BuildDecoder`, created on first mention.

Example:
    >>> events = []
    >>> log = EventLog()
    >>> log.decode_line("1,,ui,say,hello", events.append)
    <Decoding.PARTIAL: 'partial'>
    >>> events[0].kind.text
    'hello'
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from packlog.config.logging import get_logger
from packlog.decoder.build import ArtifactCompleted, BuildCompleted, BuildDecoder
from packlog.decoder.errors import STAGE_LOG, UnknownMessageError
from packlog.decoder.tokens import DEFAULT_DELIMITER, Decoding, TokenStream
from packlog.events.model import ArtifactEvent, BuildEvent, Event, UiEvent, UiKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from packlog.config.logging import PacklogLogger
    from packlog.decoder.build import BuildUpdate

logger: PacklogLogger = get_logger(__name__)

GLOBAL_TYPE_UI = "ui"


class EventLog:
    """Route build-log lines to global handling or per-build decoders.

    The build map only ever grows: finished builds are kept so that a stray
    line for them is reported instead of silently starting a new build.
    """

    def __init__(self) -> None:
        self._builds: dict[str, BuildDecoder] = {}

    def __len__(self) -> int:
        return len(self._builds)

    @property
    def builds(self) -> Mapping[str, BuildDecoder]:
        """Read-only view of the build decoders, keyed by build name."""
        return MappingProxyType(self._builds)

    def incomplete_builds(self) -> list[str]:
        """Return the names of builds that are not done, in first-seen order."""
        return [name for name, decoder in self._builds.items() if not decoder.is_done]

    def decode_line(
        self,
        line: str,
        callback: Callable[[Event], None],
        *,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> Decoding:
        """Split a raw line and decode it (see `try_decode`)."""
        return self.try_decode(TokenStream.from_line(line, delimiter), callback)

    def try_decode(self, tokens: TokenStream, callback: Callable[[Event], None]) -> Decoding:
        """Consume one full input line.

        Args:
            tokens (TokenStream): The tokens of the line, starting at the timestamp.
            callback (Callable[[Event], None]): Receives every event the line
                produces, in order (an artifact event precedes the build event it
                completes).

        Returns:
            Decoding: Always ``PARTIAL``; a log is never finished.

        Raises:
            DecodeError: Any decode failure, from this level or a nested decoder.
        """
        timestamp: str = tokens.next(STAGE_LOG, "timestamp")
        build_name: str = tokens.next(STAGE_LOG, "build name")

        if not build_name:
            callback(Event(timestamp=timestamp, kind=self._decode_global(tokens)))
            return Decoding.PARTIAL

        decoder: BuildDecoder | None = self._builds.get(build_name)
        if decoder is None:
            logger.debug("new build %r at %s", build_name, timestamp)
            decoder = BuildDecoder(build_name)
            self._builds[build_name] = decoder

        def forward(update: BuildUpdate) -> None:
            match update:
                case ArtifactCompleted(artifact=artifact):
                    callback(
                        Event(
                            timestamp=timestamp,
                            kind=ArtifactEvent(build_name=build_name, artifact=artifact),
                        )
                    )
                case BuildCompleted(build=build):
                    callback(
                        Event(
                            timestamp=timestamp,
                            kind=BuildEvent(build_name=build_name, build=build),
                        )
                    )

        decoder.try_decode(tokens, forward)
        return Decoding.PARTIAL

    @staticmethod
    def _decode_global(tokens: TokenStream) -> UiEvent:
        """Decode the tail of a global line into a `UiEvent`."""
        message_type: str = tokens.next(STAGE_LOG, "message type")
        if message_type != GLOBAL_TYPE_UI:
            raise UnknownMessageError(STAGE_LOG, "message type", message_type)

        raw_ui: str = tokens.next(STAGE_LOG, "ui type")
        try:
            ui = UiKind(raw_ui)
        except ValueError:
            raise UnknownMessageError(STAGE_LOG, "ui type", raw_ui) from None

        text: str = tokens.next(STAGE_LOG, "ui text")
        logger.trace("global %s: %r", ui.value, text)
        return UiEvent(ui=ui, text=text)
