# topmark:header:start
#
#   project      : PackLog
#   file         : build.py
#   file_relpath : src/packlog/decoder/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resumable decoder for one named build.

A build first declares how many artifacts it produces, then streams the
sub-lines of each artifact prefixed with the artifact's slot::

    artifact-count,<N>
    artifact,<slot>,<artifact sub-line>     (repeated, slots interleaved freely)

Each slot owns an `ArtifactDecoder`. The build completes on the line that
completes its last outstanding artifact; artifacts are assembled in slot order,
independent of the order in which they finished.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from packlog.config.logging import get_logger
from packlog.decoder.artifact import ArtifactDecoder
from packlog.decoder.errors import (
    STAGE_BUILD,
    DecoderFinishedError,
    IncompleteStateError,
    MalformedTokenError,
)
from packlog.decoder.tokens import Decoding
from packlog.events.model import Artifact, Build

if TYPE_CHECKING:
    from collections.abc import Callable

    from packlog.config.logging import PacklogLogger
    from packlog.decoder.tokens import TokenStream

logger: PacklogLogger = get_logger(__name__)

TAG_ARTIFACT_COUNT = "artifact-count"
TAG_ARTIFACT = "artifact"


# --- Updates reported to the owner ---


@dataclass(frozen=True, slots=True)
class ArtifactCompleted:
    """One of the build's artifacts just completed."""

    artifact: Artifact


@dataclass(frozen=True, slots=True)
class BuildCompleted:
    """The build itself just completed."""

    build: Build


BuildUpdate = ArtifactCompleted | BuildCompleted


# --- State variants ---


@dataclass(frozen=True, slots=True)
class Root:
    """Created but not yet initialized; expects ``artifact-count``."""


@dataclass(slots=True)
class ListingArtifacts:
    """Collecting artifacts.

    Attributes:
        remaining (int): Artifacts not yet complete.
        slots (list[ArtifactDecoder | None]): One entry per declared artifact; ``None``
            until the slot's first sub-line arrives.
    """

    remaining: int
    slots: list[ArtifactDecoder | None]


@dataclass(frozen=True, slots=True)
class BuildDone:
    """Terminal state holding the assembled build."""

    build: Build


BuildState = Root | ListingArtifacts | BuildDone


class BuildDecoder:
    """Reassemble one `Build` from its interleaved artifact sub-lines.

    Args:
        name (str): The build name (used for logging and error messages only).

    Attributes:
        name (str): The build name.
        state (BuildState): The current state variant.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name
        self.state: BuildState = Root()

    @property
    def is_done(self) -> bool:
        """Return True once the build has been finalized."""
        return isinstance(self.state, BuildDone)

    @property
    def declared_count(self) -> int | None:
        """Number of declared artifacts, or None before ``artifact-count`` was seen."""
        match self.state:
            case Root():
                return None
            case ListingArtifacts(slots=slots):
                return len(slots)
            case BuildDone(build=build):
                return len(build.artifacts)

    @property
    def completed_count(self) -> int:
        """Number of artifacts completed so far."""
        match self.state:
            case Root():
                return 0
            case ListingArtifacts(remaining=remaining, slots=slots):
                return len(slots) - remaining
            case BuildDone(build=build):
                return len(build.artifacts)

    def try_decode(
        self,
        tokens: TokenStream,
        callback: Callable[[BuildUpdate], None],
    ) -> Decoding:
        """Consume one build-scoped line (everything after the build name).

        Updates are queued while the line is delegated and reported through
        ``callback`` only after the new state is committed. The build completion
        follows the artifact completion on the same call when it was the last
        outstanding one.

        Args:
            tokens (TokenStream): The remaining tokens of the current input line.
            callback (Callable[[BuildUpdate], None]): Receives `ArtifactCompleted`
                and `BuildCompleted` updates.

        Returns:
            Decoding: ``DONE`` if this call completed the build, else ``PARTIAL``.

        Raises:
            DecoderFinishedError: If the build was already complete.
        """
        if isinstance(self.state, BuildDone):
            raise DecoderFinishedError(STAGE_BUILD, self.name)

        pending: list[BuildUpdate] = []
        self.state = self._advance(self.state, tokens, pending)

        status: Decoding = Decoding.PARTIAL
        if isinstance(self.state, BuildDone):
            logger.info(
                "build %r complete (%d artifact(s))", self.name, len(self.state.build.artifacts)
            )
            pending.append(BuildCompleted(self.state.build))
            status = Decoding.DONE

        for update in pending:
            callback(update)
        return status

    def _advance(
        self,
        state: BuildState,
        tokens: TokenStream,
        pending: list[BuildUpdate],
    ) -> BuildState:
        """Compute the state that follows ``state`` after consuming one line.

        Artifact completions are appended to ``pending``; nothing is emitted here.
        """
        match state:
            case Root():
                tokens.expect_tag(STAGE_BUILD, TAG_ARTIFACT_COUNT)
                count: int = tokens.next_int(STAGE_BUILD, "artifact count")
                logger.trace("build %r declares %d artifact(s)", self.name, count)
                if count == 0:
                    return BuildDone(build=Build(artifacts=()))
                return ListingArtifacts(remaining=count, slots=[None] * count)

            case ListingArtifacts(remaining=remaining, slots=slots):
                tokens.expect_tag(STAGE_BUILD, TAG_ARTIFACT)
                slot: int = tokens.next_int(STAGE_BUILD, "artifact id")
                if slot >= len(slots):
                    raise MalformedTokenError(
                        STAGE_BUILD,
                        "artifact id",
                        str(slot),
                        reason=f"build '{self.name}' declared only {len(slots)} artifact(s)",
                    )

                decoder: ArtifactDecoder | None = slots[slot]
                if decoder is None:
                    decoder = ArtifactDecoder()
                    slots[slot] = decoder

                status: Decoding = decoder.try_decode(
                    tokens,
                    lambda artifact: pending.append(ArtifactCompleted(artifact)),
                )

                # Only a completed artifact counts towards the build; its sub-lines
                # may span any number of calls before that.
                if status is Decoding.DONE:
                    remaining -= 1
                logger.trace(
                    "build %r slot %d -> %s (%d remaining)",
                    self.name,
                    slot,
                    status.value,
                    remaining,
                )

                if remaining == 0:
                    return BuildDone(build=self._assemble(slots))
                return ListingArtifacts(remaining=remaining, slots=slots)

            case BuildDone():
                raise DecoderFinishedError(STAGE_BUILD, self.name)

    def _assemble(self, slots: list[ArtifactDecoder | None]) -> Build:
        """Collect every slot's artifact in slot order.

        Raises:
            IncompleteStateError: If a slot is empty or its artifact is still partial.
        """
        artifacts: list[Artifact] = []
        for index, decoder in enumerate(slots):
            if decoder is None:
                raise IncompleteStateError(
                    STAGE_BUILD, f"build '{self.name}' artifact slot {index} never started"
                )
            artifacts.append(decoder.take())
        return Build(artifacts=tuple(artifacts))
