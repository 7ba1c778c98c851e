# topmark:header:start
#
#   project      : PackLog
#   file         : tokens.py
#   file_relpath : src/packlog/decoder/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token cursor shared by the decoders.

A `TokenStream` wraps the comma-separated tokens of one input line. Each decoder
consumes the tokens it owns and hands the *same* stream to the nested decoder,
so the remainder of a line is delegated verbatim without copying.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Final

from packlog.decoder.errors import (
    MalformedTokenError,
    MissingTokenError,
    Stage,
    UnexpectedTokenError,
)

DEFAULT_DELIMITER: Final[str] = ","


class Decoding(str, Enum):
    """Completion status returned by every ``try_decode`` call.

    Attributes:
        PARTIAL: The structure is not fully assembled yet.
        DONE: This call completed the structure.
    """

    PARTIAL = "partial"
    DONE = "done"


def split_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split one raw input line into tokens.

    Only the trailing line terminator is removed; empty fields are kept because
    an empty build name or artifact id is meaningful.

    Args:
        line (str): The raw line, with or without its terminator.
        delimiter (str): Token separator.

    Returns:
        list[str]: The tokens of the line.
    """
    return line.rstrip("\r\n").split(delimiter)


class TokenStream:
    """Forward-only cursor over the tokens of one line.

    Args:
        tokens (Iterable[str]): The tokens to iterate.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: Iterator[str] = iter(tokens)
        self.consumed: int = 0

    @classmethod
    def from_line(cls, line: str, delimiter: str = DEFAULT_DELIMITER) -> TokenStream:
        """Build a stream from a raw input line (see `split_line`)."""
        return cls(split_line(line, delimiter))

    def next(self, stage: Stage, what: str) -> str:
        """Consume and return the next token.

        Args:
            stage (Stage): Decoder stage, used for error reporting.
            what (str): Human name of the expected token, used for error reporting.

        Returns:
            str: The token (possibly empty).

        Raises:
            MissingTokenError: If the line has no more tokens.
        """
        try:
            token: str = next(self._tokens)
        except StopIteration:
            raise MissingTokenError(stage, what) from None
        self.consumed += 1
        return token

    def next_int(self, stage: Stage, what: str) -> int:
        """Consume the next token and parse it as a non-negative integer.

        Raises:
            MissingTokenError: If the line has no more tokens.
            MalformedTokenError: If the token is not a non-negative decimal integer.
        """
        raw: str = self.next(stage, what)
        try:
            value = int(raw)
        except ValueError:
            raise MalformedTokenError(stage, what, raw) from None
        if value < 0:
            raise MalformedTokenError(stage, what, raw, reason="must not be negative")
        return value

    def expect_tag(self, stage: Stage, expected: str) -> str:
        """Consume the next token and require it to equal ``expected``.

        Raises:
            MissingTokenError: If the line has no more tokens.
            UnexpectedTokenError: If the tag differs from ``expected``.
        """
        tag: str = self.next(stage, "message")
        if tag != expected:
            raise UnexpectedTokenError(stage, expected=expected, actual=tag)
        return tag

    def remaining(self) -> list[str]:
        """Consume and return every token left on the line."""
        rest: list[str] = list(self._tokens)
        self.consumed += len(rest)
        return rest
