# topmark:header:start
#
#   project      : PackLog
#   file         : test_tokens.py
#   file_relpath : tests/decoder/test_tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `packlog.decoder.tokens`: line splitting and the token cursor."""

from __future__ import annotations

import pytest

from packlog.decoder.errors import MalformedTokenError, MissingTokenError, UnexpectedTokenError
from packlog.decoder.tokens import TokenStream, split_line


def test_split_line_keeps_empty_fields() -> None:
    """It should keep empty tokens (an empty build name is meaningful)."""
    assert split_line("1,,ui,say,hi") == ["1", "", "ui", "say", "hi"]
    assert split_line("2,b1,artifact,0,id,") == ["2", "b1", "artifact", "0", "id", ""]


@pytest.mark.parametrize("terminator", ["\n", "\r\n", ""])
def test_split_line_strips_only_the_terminator(terminator: str) -> None:
    """It should remove the trailing line terminator and nothing else."""
    assert split_line(f"1, b ,x{terminator}") == ["1", " b ", "x"]


def test_split_line_custom_delimiter() -> None:
    """It should split on the configured delimiter only."""
    assert split_line("1;b1;artifact-count;2", ";") == ["1", "b1", "artifact-count", "2"]
    assert split_line("1;a,b", ";") == ["1", "a,b"]


def test_stream_counts_consumed_tokens() -> None:
    """It should track how many tokens were consumed, including `remaining()`."""
    ts = TokenStream(["a", "b", "c"])
    assert ts.next("log", "timestamp") == "a"
    assert ts.consumed == 1
    assert ts.remaining() == ["b", "c"]
    assert ts.consumed == 3


def test_next_on_exhausted_stream_raises_missing() -> None:
    """It should report the missing token by name and stage."""
    ts = TokenStream([])
    with pytest.raises(MissingTokenError) as excinfo:
        ts.next("build", "artifact count")
    assert str(excinfo.value) == "no artifact count specified in build line"
    assert excinfo.value.stage == "build"


@pytest.mark.parametrize("raw", ["x", "1.5", "", " 3"])
def test_next_int_rejects_non_numeric(raw: str) -> None:
    """It should raise MalformedTokenError for tokens that are not integers."""
    with pytest.raises(MalformedTokenError) as excinfo:
        TokenStream([raw]).next_int("artifact", "file count")
    assert excinfo.value.value == raw


def test_next_int_rejects_negative() -> None:
    """It should refuse negative counts."""
    with pytest.raises(MalformedTokenError, match="must not be negative"):
        TokenStream(["-1"]).next_int("build", "artifact count")


def test_expect_tag_mismatch() -> None:
    """It should name both the expected and the actual tag."""
    with pytest.raises(UnexpectedTokenError) as excinfo:
        TokenStream(["file"]).expect_tag("artifact", "end")
    exc: UnexpectedTokenError = excinfo.value
    assert (exc.expected, exc.actual) == ("end", "file")
    assert str(exc) == "unexpected token 'file' in artifact, expected 'end'"


def test_expect_tag_missing_reports_message() -> None:
    """It should report a missing tag as a missing message."""
    with pytest.raises(MissingTokenError, match="no message specified in artifact line"):
        TokenStream([]).expect_tag("artifact", "end")
