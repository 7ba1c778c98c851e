# topmark:header:start
#
#   project      : PackLog
#   file         : errors.py
#   file_relpath : src/packlog/decoder/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode errors raised by the build-log state machines.

Every error is fatal for the decode session that raised it: the decoders do not
resynchronize, and callers must treat everything after the failing line as
corrupted. Errors carry the decoder ``stage`` that detected them
(``"artifact"``, ``"build"`` or ``"log"``); the stream driver additionally fills
in ``line_no`` and ``line`` before re-raising.
"""

from __future__ import annotations

from typing import Final, Literal

Stage = Literal["artifact", "build", "log"]

STAGE_ARTIFACT: Final[Stage] = "artifact"
STAGE_BUILD: Final[Stage] = "build"
STAGE_LOG: Final[Stage] = "log"


class DecodeError(Exception):
    """Base class for all build-log decode failures.

    Attributes:
        stage (Stage): The decoder stage that detected the failure.
        line_no (int | None): 1-based input line number, when known.
        line (str | None): The raw input line, when known.
    """

    stage: Stage
    line_no: int | None
    line: str | None

    def __init__(self, stage: Stage, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.message = message
        self.line_no = None
        self.line = None

    def __str__(self) -> str:
        """Return the message, prefixed with the line number when known."""
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class UnexpectedTokenError(DecodeError):
    """A line's tag token does not match what the current state requires."""

    def __init__(self, stage: Stage, *, expected: str, actual: str) -> None:
        super().__init__(
            stage,
            f"unexpected token '{actual}' in {stage}, expected '{expected}'",
        )
        self.expected = expected
        self.actual = actual


class MissingTokenError(DecodeError):
    """A required token is absent from the line."""

    def __init__(self, stage: Stage, what: str) -> None:
        super().__init__(stage, f"no {what} specified in {stage} line")
        self.what = what


class MalformedTokenError(DecodeError):
    """A token is present but cannot be used (unparsable or out-of-range number)."""

    def __init__(
        self,
        stage: Stage,
        what: str,
        value: str,
        reason: str = "not a valid count",
    ) -> None:
        super().__init__(stage, f"malformed {what} '{value}' in {stage} line: {reason}")
        self.what = what
        self.value = value


class UnknownMessageError(DecodeError):
    """A global line names a message type or UI sub-type the decoder does not know."""

    def __init__(self, stage: Stage, kind: str, value: str) -> None:
        super().__init__(stage, f"unexpected global {kind}: '{value}'")
        self.kind = kind
        self.value = value


class DecoderFinishedError(DecodeError):
    """A line was routed to an artifact or build decoder that already finished."""

    def __init__(self, stage: Stage, subject: str | None = None) -> None:
        what = f"{stage} '{subject}'" if subject else stage
        super().__init__(stage, f"already finished the {what}")
        self.subject = subject


class IncompleteStateError(DecodeError):
    """A structure was finalized while some of its nested parts were still partial."""

    def __init__(self, stage: Stage, detail: str) -> None:
        super().__init__(stage, f"{stage} not done yet: {detail}")
        self.detail = detail
