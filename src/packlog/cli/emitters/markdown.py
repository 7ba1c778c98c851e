# topmark:header:start
#
#   project      : PackLog
#   file         : markdown.py
#   file_relpath : src/packlog/cli/emitters/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering of decoded events.

Streaming mode renders one table of all events after end of input; aggregate
mode renders a messages table plus one section per build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.events.model import ArtifactEvent, BuildEvent, UiEvent
from packlog.rendering.markdown import escape_cell, render_markdown_table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from packlog.events.aggregate import BuildSummary, LogSummary
    from packlog.events.model import Artifact, Event

MARKDOWN_TITLE = "# PackLog events"


def _files_cell(artifact: Artifact) -> str:
    return escape_cell(", ".join(artifact.files))


def _event_row(event: Event) -> list[str]:
    ts: str = escape_cell(event.timestamp)
    match event.kind:
        case UiEvent(ui=ui, text=text):
            return [ts, ui.value, "", escape_cell(text)]
        case ArtifactEvent(build_name=name, artifact=a):
            details: str = (
                f"builder `{escape_cell(a.builder_id)}`, id `{escape_cell(a.id or '-')}`, "
                f"files: {_files_cell(a)}"
            )
            return [ts, "artifact", escape_cell(name), details]
        case BuildEvent(build_name=name, build=build):
            return [ts, "build", escape_cell(name), f"{len(build.artifacts)} artifact(s)"]


def render_events_markdown(events: Sequence[Event]) -> str:
    """Render a list of events as a Markdown document.

    Args:
        events: Events in emission order.

    Returns:
        The document, ending with a newline.
    """
    lines: list[str] = [MARKDOWN_TITLE, ""]
    if not events:
        lines.extend(["_No events._", ""])
        return "\n".join(lines)
    table: str = render_markdown_table(
        ["Timestamp", "Kind", "Build", "Details"],
        [_event_row(e) for e in events],
    )
    return "\n".join(lines) + "\n" + table


def _build_section(build: BuildSummary) -> list[str]:
    status: str = "done" if build.done else "incomplete"
    lines: list[str] = [f"## Build `{build.name}`", "", f"- **Status:** {status}"]
    if build.timestamp is not None:
        lines.append(f"- **Completed at:** {build.timestamp}")
    lines.append("")
    if build.artifacts:
        rows: list[list[str]] = [
            [str(i), escape_cell(a.builder_id), escape_cell(a.id or "-"), _files_cell(a)]
            for i, a in enumerate(build.artifacts)
        ]
        lines.append(
            render_markdown_table(
                ["#", "Builder", "Id", "Files"], rows, align={0: "right"}
            ).rstrip("\n")
        )
        lines.append("")
    return lines


def render_summary_markdown(summary: LogSummary) -> str:
    """Render an aggregated summary as a Markdown document.

    Args:
        summary: The aggregated summary.

    Returns:
        The document, ending with a newline.
    """
    lines: list[str] = [MARKDOWN_TITLE, ""]
    if summary.include_messages:
        lines.extend(["## Messages", ""])
        if summary.messages:
            rows: list[list[str]] = [_event_row(e) for e in summary.messages]
            table: str = render_markdown_table(
                ["Timestamp", "Type", "Text"], [[r[0], r[1], r[3]] for r in rows]
            )
            lines.append(table.rstrip("\n"))
        else:
            lines.append("_No messages._")
        lines.append("")
    if summary.include_builds:
        for build in summary.builds.values():
            lines.extend(_build_section(build))
        if summary.incomplete:
            names: str = ", ".join(f"`{n}`" for n in summary.incomplete)
            lines.extend([f"> **Warning:** incomplete build(s): {names}", ""])
    return "\n".join(lines)
