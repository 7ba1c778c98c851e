# topmark:header:start
#
#   project      : PackLog
#   file         : model.py
#   file_relpath : src/packlog/events/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain records produced by the build-log decoder.

Sections:
    * `Artifact` / `Build`: completed build outputs.
    * `UiKind`: the global UI message sub-types (``say``, ``message``, ``error``).
    * `UiEvent` / `ArtifactEvent` / `BuildEvent`: the event kinds (a tagged union,
      see `EventKind`).
    * `Event`: a timestamped event, the unit delivered to consumers.
    * `EventCategory`: the filter vocabulary exposed on the command line.

All records are frozen dataclasses holding tuples, so handing one to a callback
is as safe as handing out a copy. Every record exposes ``to_dict()`` so the
machine-output layer can serialize it without knowing its shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from yachalk import chalk

from packlog.rendering.colored_enum import ColoredStrEnum


@dataclass(frozen=True, slots=True)
class Artifact:
    """One build output.

    Attributes:
        builder_id (str): Identifier of the builder that produced the artifact.
        id (str | None): Artifact identifier; ``None`` when the log carried an empty id.
        files (tuple[str, ...]): File names in slot-index order.
    """

    builder_id: str
    id: str | None
    files: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this artifact."""
        return {
            "builder_id": self.builder_id,
            "id": self.id,
            "files": list(self.files),
        }


@dataclass(frozen=True, slots=True)
class Build:
    """The complete output set of one named build.

    Attributes:
        artifacts (tuple[Artifact, ...]): Completed artifacts in slot order; the
            length always equals the declared artifact count.
    """

    artifacts: tuple[Artifact, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this build."""
        return {"artifacts": [a.to_dict() for a in self.artifacts]}


class EventCategory(str, Enum):
    """User-facing event categories (used by ``--filter``).

    Attributes:
        BUILDS: Build-completion events.
        ARTIFACTS: Artifact-completion events.
        MESSAGES: Global UI messages.
    """

    BUILDS = "builds"
    ARTIFACTS = "artifacts"
    MESSAGES = "messages"


class UiKind(ColoredStrEnum):
    """Sub-type of a global ``ui`` line; values are the raw log tokens."""

    SAY = ("say", chalk.white)
    MESSAGE = ("message", chalk.cyan)
    ERROR = ("error", chalk.red_bright)


@dataclass(frozen=True, slots=True)
class UiEvent:
    """A global UI notice (``<ts>,,ui,<say|message|error>,<text>``)."""

    ui: UiKind
    text: str

    @property
    def category(self) -> EventCategory:
        """Filter category of this event kind."""
        return EventCategory.MESSAGES

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this UI notice."""
        return {"ui": self.ui.value, "text": self.text}


@dataclass(frozen=True, slots=True)
class ArtifactEvent:
    """An artifact of build ``build_name`` completed."""

    build_name: str
    artifact: Artifact

    @property
    def category(self) -> EventCategory:
        """Filter category of this event kind."""
        return EventCategory.ARTIFACTS

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this artifact notice."""
        return {"build_name": self.build_name, "artifact": self.artifact.to_dict()}


@dataclass(frozen=True, slots=True)
class BuildEvent:
    """Build ``build_name`` completed (all declared artifacts are done)."""

    build_name: str
    build: Build

    @property
    def category(self) -> EventCategory:
        """Filter category of this event kind."""
        return EventCategory.BUILDS

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this build notice."""
        return {"build_name": self.build_name, "build": self.build.to_dict()}


EventKind = UiEvent | ArtifactEvent | BuildEvent


@dataclass(frozen=True, slots=True)
class Event:
    """A timestamped event delivered to the decoder's consumer.

    Attributes:
        timestamp (str): The raw timestamp token of the line that produced the event.
        kind (EventKind): What happened.
    """

    timestamp: str
    kind: EventKind

    @property
    def category(self) -> EventCategory:
        """Filter category of the wrapped event kind."""
        return self.kind.category

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this event."""
        return {"timestamp": self.timestamp, **self.kind.to_dict()}
