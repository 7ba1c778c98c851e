# topmark:header:start
#
#   project      : PackLog
#   file         : test_emitters.py
#   file_relpath : tests/cli/test_emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the human-facing text and Markdown emitters."""

from __future__ import annotations

from packlog.cli.emitters.markdown import render_events_markdown, render_summary_markdown
from packlog.cli.emitters.text import describe_artifact, render_event_text, render_summary_text
from packlog.events.aggregate import Aggregator
from packlog.events.model import Artifact, ArtifactEvent, Build, BuildEvent, Event, UiEvent, UiKind

ARTIFACT = Artifact(builder_id="pkg|A", id="a1", files=("x", "y"))


def test_describe_artifact() -> None:
    """It should show placeholders for an absent id and an empty file list."""
    assert describe_artifact(Artifact("b", None, ())) == "builder=b id=- files=-"
    assert describe_artifact(ARTIFACT) == "builder=pkg|A id=a1 files=x, y"


def test_text_lines_without_color() -> None:
    """It should render plain lines when color is disabled."""
    ui = Event("1", UiEvent(ui=UiKind.ERROR, text="boom"))
    build = Event("2", BuildEvent("b1", Build(artifacts=(ARTIFACT,))))
    assert render_event_text(ui, enable_color=False) == "[1] error: boom"
    assert render_event_text(build, enable_color=False) == "[2] build b1: done, 1 artifact(s)"


def test_text_with_color_keeps_content() -> None:
    """It should decorate the label but keep the rest of the line intact."""
    line = render_event_text(Event("3", ArtifactEvent("b1", ARTIFACT)), enable_color=True)
    assert line.startswith("[3] ")
    assert line.endswith(" b1: builder=pkg|A id=a1 files=x, y")


def test_text_summary_marks_incomplete_builds() -> None:
    """It should flag unfinished builds in the summary."""
    agg = Aggregator()
    agg.add(Event("1", ArtifactEvent("b1", ARTIFACT)))
    lines = render_summary_text(agg.finish(["b1"]), enable_color=False)
    assert lines == [
        "messages (0):",
        "builds (1):",
        "  b1: incomplete, 1 artifact(s)",
        "    - builder=pkg|A id=a1 files=x, y",
    ]


def test_markdown_escapes_pipes() -> None:
    """It should escape table separators inside cells."""
    doc = render_events_markdown([Event("1", ArtifactEvent("b1", ARTIFACT))])
    assert "pkg\\|A" in doc
    assert doc.endswith("\n")


def test_markdown_empty() -> None:
    """It should state that there were no events."""
    assert "_No events._" in render_events_markdown([])


def test_markdown_summary_sections() -> None:
    """It should render a messages table and an artifacts table per build."""
    agg = Aggregator()
    agg.add(Event("1", UiEvent(ui=UiKind.SAY, text="hi")))
    agg.add(Event("2", BuildEvent("b1", Build(artifacts=(ARTIFACT,)))))
    doc = render_summary_markdown(agg.finish(["b1"]))

    assert "## Messages" in doc
    assert "| Timestamp | Type | Text |" in doc
    assert "## Build `b1`" in doc
    assert "- **Completed at:** 2" in doc
    assert "| # " in doc
    assert "Warning" not in doc
