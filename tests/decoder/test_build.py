# topmark:header:start
#
#   project      : PackLog
#   file         : test_build.py
#   file_relpath : tests/decoder/test_build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `BuildDecoder`: artifact count, slot routing and completion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from packlog.decoder.build import (
    ArtifactCompleted,
    BuildCompleted,
    BuildDecoder,
    BuildDone,
    ListingArtifacts,
    Root,
)
from packlog.decoder.errors import (
    DecoderFinishedError,
    MalformedTokenError,
    UnexpectedTokenError,
)
from packlog.decoder.tokens import Decoding, TokenStream
from packlog.events.model import Artifact, Build
from tests.conftest import artifact_lines

if TYPE_CHECKING:
    from collections.abc import Sequence

    from packlog.decoder.build import BuildUpdate


def strip_build(lines: Sequence[str]) -> list[str]:
    """Drop the ``<timestamp>,<build>,`` prefix of full log lines."""
    return [line.split(",", 2)[2] for line in lines]


def feed(decoder: BuildDecoder, lines: Sequence[str]) -> list[BuildUpdate]:
    """Feed build-scoped lines and return the updates the callback received."""
    updates: list[BuildUpdate] = []
    for line in lines:
        decoder.try_decode(TokenStream.from_line(line), updates.append)
    return updates


def test_zero_artifacts_completes_immediately() -> None:
    """It should complete on the count line when no artifacts are declared."""
    dec = BuildDecoder("b0")
    updates: list[BuildUpdate] = []
    status = dec.try_decode(TokenStream.from_line("artifact-count,0"), updates.append)
    assert status is Decoding.DONE
    assert updates == [BuildCompleted(Build(artifacts=()))]
    assert isinstance(dec.state, BuildDone)
    assert dec.declared_count == 0


def test_counts_before_and_after_declaration() -> None:
    """It should expose declared and completed counts as decoding progresses."""
    dec = BuildDecoder("b1")
    assert isinstance(dec.state, Root)
    assert dec.declared_count is None
    assert dec.completed_count == 0

    feed(dec, ["artifact-count,2"])
    assert isinstance(dec.state, ListingArtifacts)
    assert dec.declared_count == 2
    assert dec.completed_count == 0

    feed(dec, strip_build(artifact_lines("b1", 1)))
    assert dec.completed_count == 1
    assert not dec.is_done


def test_artifact_then_build_on_the_last_line() -> None:
    """It should report the artifact before the build on the completing line."""
    dec = BuildDecoder("b1")
    lines = ["artifact-count,1", *strip_build(artifact_lines("b1", 0))]
    updates = feed(dec, lines[:-1])
    assert updates == []

    updates = feed(dec, lines[-1:])
    artifact = Artifact(builder_id="pkgA", id=None, files=("out.bin",))
    assert updates == [ArtifactCompleted(artifact), BuildCompleted(Build(artifacts=(artifact,)))]


def test_slot_order_independent_of_completion_order() -> None:
    """It should assemble artifacts by slot even when slot 1 finishes first."""
    dec = BuildDecoder("b1")
    slot0 = strip_build(artifact_lines("b1", 0, builder_id="first"))
    slot1 = strip_build(artifact_lines("b1", 1, builder_id="second"))

    updates = feed(dec, ["artifact-count,2", *slot0[:-1], *slot1, slot0[-1]])

    completed = [u.artifact.builder_id for u in updates if isinstance(u, ArtifactCompleted)]
    assert completed == ["second", "first"]
    final = updates[-1]
    assert isinstance(final, BuildCompleted)
    assert [a.builder_id for a in final.build.artifacts] == ["first", "second"]


def test_interleaved_sublines() -> None:
    """It should accept sub-lines of different slots alternating line by line."""
    dec = BuildDecoder("b1")
    slot0 = strip_build(artifact_lines("b1", 0, files=("a",)))
    slot1 = strip_build(artifact_lines("b1", 1, files=("b", "c")))
    mixed: list[str] = []
    for pair in zip(slot0, slot1[: len(slot0)]):
        mixed.extend(pair)
    mixed.extend(slot1[len(slot0) :])

    updates = feed(dec, ["artifact-count,2", *mixed])

    assert isinstance(updates[-1], BuildCompleted)
    assert updates[-1].build.artifacts[1].files == ("b", "c")


def test_count_must_come_first() -> None:
    """It should require `artifact-count` as the first build line."""
    with pytest.raises(UnexpectedTokenError) as excinfo:
        feed(BuildDecoder("b1"), ["artifact,0,builder-id,x"])
    assert excinfo.value.expected == "artifact-count"


def test_slot_out_of_range() -> None:
    """It should reject an artifact slot beyond the declared count."""
    with pytest.raises(MalformedTokenError, match="declared only 1 artifact"):
        feed(BuildDecoder("b1"), ["artifact-count,1", "artifact,1,builder-id,x"])


def test_line_after_completion() -> None:
    """It should name the finished build when another line arrives for it."""
    dec = BuildDecoder("b0")
    feed(dec, ["artifact-count,0"])
    with pytest.raises(DecoderFinishedError, match="already finished the build 'b0'"):
        feed(dec, ["artifact-count,0"])


def test_line_for_finished_artifact_slot() -> None:
    """It should reject more sub-lines for a slot whose artifact is done."""
    dec = BuildDecoder("b1")
    feed(dec, ["artifact-count,2", *strip_build(artifact_lines("b1", 0))])
    with pytest.raises(DecoderFinishedError, match="already finished the artifact"):
        feed(dec, ["artifact,0,end"])


def test_failing_callback_does_not_stall_the_build() -> None:
    """It should commit the completed artifact before reporting it."""
    dec = BuildDecoder("b")
    feed(dec, ["artifact-count,1"])
    lines: list[str] = strip_build(artifact_lines("b", 0))
    feed(dec, lines[:-1])

    def explode(update: BuildUpdate) -> None:
        raise RuntimeError("consumer failed")

    with pytest.raises(RuntimeError):
        dec.try_decode(TokenStream.from_line(lines[-1]), explode)
    assert dec.is_done
    assert dec.completed_count == 1
