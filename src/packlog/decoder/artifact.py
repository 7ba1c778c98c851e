# topmark:header:start
#
#   project      : PackLog
#   file         : artifact.py
#   file_relpath : src/packlog/decoder/artifact.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resumable decoder for a single artifact.

An artifact is described by a fixed sequence of sub-lines, each arriving on its
own input line (possibly far apart, interleaved with other builds)::

    builder-id,<builder id>
    id,<artifact id or empty>
    string,<description>
    files-count,<N>
    file,<index>,<name>        (N times, any index order)
    end

`ArtifactDecoder` keeps exactly one state variant at a time. Transitions are
strictly forward: ``Root`` → ``HasBuilderId`` → ``HasId`` → ``HasString`` →
``ListingFiles`` → ``ArtifactDone``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from packlog.config.logging import get_logger
from packlog.decoder.errors import (
    STAGE_ARTIFACT,
    DecoderFinishedError,
    IncompleteStateError,
    MalformedTokenError,
)
from packlog.decoder.tokens import Decoding
from packlog.events.model import Artifact

if TYPE_CHECKING:
    from collections.abc import Callable

    from packlog.config.logging import PacklogLogger
    from packlog.decoder.tokens import TokenStream

logger: PacklogLogger = get_logger(__name__)

TAG_BUILDER_ID = "builder-id"
TAG_ID = "id"
TAG_STRING = "string"
TAG_FILES_COUNT = "files-count"
TAG_FILE = "file"
TAG_END = "end"


# --- State variants ---


@dataclass(frozen=True, slots=True)
class Root:
    """Nothing seen yet; expects ``builder-id``."""


@dataclass(frozen=True, slots=True)
class HasBuilderId:
    """Builder id seen; expects ``id``."""

    builder_id: str


@dataclass(frozen=True, slots=True)
class HasId:
    """Artifact id seen; expects ``string``."""

    builder_id: str
    id: str | None


@dataclass(frozen=True, slots=True)
class HasString:
    """Description seen; expects ``files-count``."""

    builder_id: str
    id: str | None
    string: str


@dataclass(frozen=True, slots=True)
class ListingFiles:
    """Collecting file slots; expects ``file`` while ``remaining > 0``, then ``end``."""

    builder_id: str
    id: str | None
    string: str
    remaining: int
    files: tuple[str | None, ...]


@dataclass(frozen=True, slots=True)
class ArtifactDone:
    """Terminal state holding the assembled artifact."""

    artifact: Artifact


ArtifactState = Root | HasBuilderId | HasId | HasString | ListingFiles | ArtifactDone


class ArtifactDecoder:
    """Reassemble one `Artifact` from its sub-lines.

    Attributes:
        state (ArtifactState): The current state variant.
    """

    def __init__(self) -> None:
        self.state: ArtifactState = Root()

    @property
    def is_done(self) -> bool:
        """Return True once the artifact has been finalized."""
        return isinstance(self.state, ArtifactDone)

    def try_decode(self, tokens: TokenStream, callback: Callable[[Artifact], None]) -> Decoding:
        """Consume one artifact sub-line.

        Args:
            tokens (TokenStream): The remaining tokens of the current input line,
                starting at the artifact tag.
            callback (Callable[[Artifact], None]): Invoked once, with the finished
                artifact, on the call that completes it.

        Returns:
            Decoding: ``DONE`` if this call completed the artifact, else ``PARTIAL``.

        Raises:
            DecoderFinishedError: If the artifact was already complete.
        """
        if isinstance(self.state, ArtifactDone):
            raise DecoderFinishedError(STAGE_ARTIFACT)

        self.state = self._advance(self.state, tokens)
        logger.trace("artifact decoder -> %s", type(self.state).__name__)

        if isinstance(self.state, ArtifactDone):
            callback(self.state.artifact)
            return Decoding.DONE
        return Decoding.PARTIAL

    def take(self) -> Artifact:
        """Return the finished artifact.

        Raises:
            IncompleteStateError: If the artifact is not done yet.
        """
        if not isinstance(self.state, ArtifactDone):
            raise IncompleteStateError(
                STAGE_ARTIFACT, f"still in state {type(self.state).__name__}"
            )
        return self.state.artifact

    @staticmethod
    def _advance(state: ArtifactState, tokens: TokenStream) -> ArtifactState:
        """Compute the state that follows ``state`` after consuming one sub-line."""
        match state:
            case Root():
                tokens.expect_tag(STAGE_ARTIFACT, TAG_BUILDER_ID)
                return HasBuilderId(builder_id=tokens.next(STAGE_ARTIFACT, "builder id"))

            case HasBuilderId(builder_id=builder_id):
                tokens.expect_tag(STAGE_ARTIFACT, TAG_ID)
                raw_id: str = tokens.next(STAGE_ARTIFACT, "id")
                return HasId(builder_id=builder_id, id=raw_id or None)

            case HasId(builder_id=builder_id, id=artifact_id):
                tokens.expect_tag(STAGE_ARTIFACT, TAG_STRING)
                return HasString(
                    builder_id=builder_id,
                    id=artifact_id,
                    string=tokens.next(STAGE_ARTIFACT, "string"),
                )

            case HasString(builder_id=builder_id, id=artifact_id, string=string):
                tokens.expect_tag(STAGE_ARTIFACT, TAG_FILES_COUNT)
                count: int = tokens.next_int(STAGE_ARTIFACT, "file count")
                return ListingFiles(
                    builder_id=builder_id,
                    id=artifact_id,
                    string=string,
                    remaining=count,
                    files=(None,) * count,
                )

            case ListingFiles(remaining=0):
                tokens.expect_tag(STAGE_ARTIFACT, TAG_END)
                return ArtifactDone(artifact=_finalize(state))

            case ListingFiles():
                tokens.expect_tag(STAGE_ARTIFACT, TAG_FILE)
                index: int = tokens.next_int(STAGE_ARTIFACT, "file id")
                name: str = tokens.next(STAGE_ARTIFACT, "file name")
                if index >= len(state.files):
                    raise MalformedTokenError(
                        STAGE_ARTIFACT,
                        "file id",
                        str(index),
                        reason=f"only {len(state.files)} file(s) declared",
                    )
                if state.files[index] is not None:
                    logger.debug(
                        "overwriting file slot %d (%r -> %r)", index, state.files[index], name
                    )
                files: list[str | None] = list(state.files)
                files[index] = name
                return replace(state, remaining=state.remaining - 1, files=tuple(files))

            case ArtifactDone():
                raise DecoderFinishedError(STAGE_ARTIFACT)


def _finalize(state: ListingFiles) -> Artifact:
    """Assemble the artifact from a fully listed state.

    Raises:
        IncompleteStateError: If a file slot was never filled (e.g. because a
            slot index was sent twice).
    """
    missing: list[int] = [i for i, name in enumerate(state.files) if name is None]
    if missing:
        raise IncompleteStateError(
            STAGE_ARTIFACT,
            f"file slot(s) {', '.join(str(i) for i in missing)} never filled",
        )
    files: tuple[str, ...] = tuple(name for name in state.files if name is not None)
    artifact = Artifact(builder_id=state.builder_id, id=state.id, files=files)
    logger.info("artifact from builder %r complete (%d file(s))", artifact.builder_id, len(files))
    return artifact
