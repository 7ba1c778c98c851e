# topmark:header:start
#
#   project      : PackLog
#   file         : aggregate.py
#   file_relpath : src/packlog/events/aggregate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fold an event stream into one summary document.

`Aggregator` is fed every decoded `Event` and, at end of input, the names of the
builds that never completed. The resulting `LogSummary` is what
``packlog decode --aggregate`` renders:

    {
      "messages": [{"timestamp": ..., "ui": "say", "text": ...}, ...],
      "builds": {"<name>": {"done": true, "artifacts": [...]}, ...},
      "incomplete": ["<name>", ...]
    }

Builds are listed in first-seen order. A completed build lists its artifacts in
slot order; an incomplete one lists the artifacts completed so far, in
completion order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from packlog.config.logging import get_logger
from packlog.events.model import ArtifactEvent, BuildEvent, EventCategory, UiEvent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packlog.config.logging import PacklogLogger
    from packlog.events.model import Artifact, Event

logger: PacklogLogger = get_logger(__name__)


@dataclass(slots=True)
class BuildSummary:
    """What is known about one build at the end of input.

    Attributes:
        name (str): The build name.
        done (bool): Whether the build completed.
        artifacts (list[Artifact]): Completed artifacts (see module docstring for order).
        timestamp (str | None): Timestamp of the completing line, if done.
    """

    name: str
    done: bool = False
    artifacts: list[Artifact] = field(default_factory=lambda: [])
    timestamp: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this build summary."""
        return {
            "done": self.done,
            "timestamp": self.timestamp,
            "artifacts": [a.to_dict() for a in self.artifacts],
        }


@dataclass(slots=True)
class LogSummary:
    """Aggregated view of a whole build log.

    Attributes:
        messages (list[Event]): Global UI message events, in input order.
        builds (dict[str, BuildSummary]): Per-build summaries, in first-seen order.
        categories (frozenset[EventCategory]): Categories to include when rendering;
            ``messages`` controls the message list, ``builds``/``artifacts`` the
            build map.
    """

    messages: list[Event] = field(default_factory=lambda: [])
    builds: dict[str, BuildSummary] = field(default_factory=lambda: {})
    categories: frozenset[EventCategory] = frozenset(EventCategory)

    @property
    def include_messages(self) -> bool:
        """Whether the message list is part of the rendered summary."""
        return EventCategory.MESSAGES in self.categories

    @property
    def include_builds(self) -> bool:
        """Whether the build map is part of the rendered summary."""
        return bool({EventCategory.BUILDS, EventCategory.ARTIFACTS} & self.categories)

    @property
    def incomplete(self) -> list[str]:
        """Names of builds that never completed, in first-seen order."""
        return [name for name, b in self.builds.items() if not b.done]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this summary."""
        out: dict[str, Any] = {}
        if self.include_messages:
            out["messages"] = [e.to_dict() for e in self.messages]
        if self.include_builds:
            out["builds"] = {name: b.to_dict() for name, b in self.builds.items()}
            out["incomplete"] = self.incomplete
        return out


class Aggregator:
    """Accumulate events into a `LogSummary`.

    Args:
        categories (Iterable[EventCategory] | None): Categories to include in the
            summary; ``None`` or empty means all.
    """

    def __init__(self, categories: Iterable[EventCategory] | None = None) -> None:
        wanted: frozenset[EventCategory] = frozenset(categories or ())
        self.summary: LogSummary = LogSummary(categories=wanted or frozenset(EventCategory))

    def _build(self, name: str) -> BuildSummary:
        build: BuildSummary | None = self.summary.builds.get(name)
        if build is None:
            build = BuildSummary(name=name)
            self.summary.builds[name] = build
        return build

    def add(self, event: Event) -> None:
        """Fold one event into the summary."""
        match event.kind:
            case UiEvent():
                self.summary.messages.append(event)
            case ArtifactEvent(build_name=name, artifact=artifact):
                self._build(name).artifacts.append(artifact)
            case BuildEvent(build_name=name, build=build):
                summary: BuildSummary = self._build(name)
                summary.done = True
                summary.timestamp = event.timestamp
                summary.artifacts = list(build.artifacts)

    def finish(self, seen: Iterable[str] = ()) -> LogSummary:
        """Order the build map by first mention and return the summary.

        Args:
            seen (Iterable[str]): Names of every build the decoder saw, in
                first-seen order (the keys of `EventLog.builds`). Builds that
                never produced an event are added as incomplete.

        Returns:
            LogSummary: The final summary.
        """
        ordered: dict[str, BuildSummary] = {name: self._build(name) for name in seen}
        ordered.update(self.summary.builds)
        self.summary.builds = ordered
        logger.debug(
            "aggregated %d message(s), %d build(s) (%d incomplete)",
            len(self.summary.messages),
            len(self.summary.builds),
            len(self.summary.incomplete),
        )
        return self.summary
