# topmark:header:start
#
#   project      : PackLog
#   file         : text.py
#   file_relpath : src/packlog/cli/emitters/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text rendering of decoded events.

One line per event, ``[timestamp] <kind> ...``; labels are colorized through
`ColoredStrEnum` members when color is enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

from packlog.events.model import ArtifactEvent, BuildEvent, UiEvent
from packlog.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from packlog.events.aggregate import BuildSummary, LogSummary
    from packlog.events.model import Artifact, Event


class EventLabel(ColoredStrEnum):
    """Labels for build-scoped events."""

    ARTIFACT = ("artifact", chalk.green)
    BUILD = ("build", chalk.magenta_bright)
    INCOMPLETE = ("incomplete", chalk.yellow)


def describe_artifact(artifact: Artifact) -> str:
    """Return ``builder=<id> id=<id|-> files=<a,b,...>`` for an artifact."""
    files: str = ", ".join(artifact.files) if artifact.files else "-"
    return f"builder={artifact.builder_id} id={artifact.id or '-'} files={files}"


def render_event_text(event: Event, *, enable_color: bool) -> str:
    """Render one event as a single line of text.

    Args:
        event (Event): The event to render.
        enable_color (bool): Whether to emit ANSI colors.

    Returns:
        str: The rendered line (no trailing newline).
    """
    prefix: str = f"[{event.timestamp}]"
    match event.kind:
        case UiEvent(ui=ui, text=text):
            return f"{prefix} {ui.paint(ui.value, enable_color=enable_color)}: {text}"
        case ArtifactEvent(build_name=name, artifact=artifact):
            label: str = EventLabel.ARTIFACT.paint("artifact", enable_color=enable_color)
            return f"{prefix} {label} {name}: {describe_artifact(artifact)}"
        case BuildEvent(build_name=name, build=build):
            label = EventLabel.BUILD.paint("build", enable_color=enable_color)
            return f"{prefix} {label} {name}: done, {len(build.artifacts)} artifact(s)"


def _render_build_summary(build: BuildSummary, *, enable_color: bool) -> list[str]:
    status: EventLabel = EventLabel.BUILD if build.done else EventLabel.INCOMPLETE
    state: str = "done" if build.done else "incomplete"
    lines: list[str] = [
        f"  {status.paint(build.name, enable_color=enable_color)}: {state}, "
        f"{len(build.artifacts)} artifact(s)"
    ]
    lines.extend(f"    - {describe_artifact(a)}" for a in build.artifacts)
    return lines


def render_summary_text(summary: LogSummary, *, enable_color: bool) -> list[str]:
    """Render an aggregated summary as text lines.

    Args:
        summary (LogSummary): The aggregated summary.
        enable_color (bool): Whether to emit ANSI colors.

    Returns:
        list[str]: Lines without trailing newlines.
    """
    lines: list[str] = []
    if summary.include_messages:
        lines.append(f"messages ({len(summary.messages)}):")
        lines.extend(
            f"  {render_event_text(e, enable_color=enable_color)}" for e in summary.messages
        )
    if summary.include_builds:
        lines.append(f"builds ({len(summary.builds)}):")
        for build in summary.builds.values():
            lines.extend(_render_build_summary(build, enable_color=enable_color))
    return lines
