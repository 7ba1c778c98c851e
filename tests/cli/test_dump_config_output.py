# topmark:header:start
#
#   project      : PackLog
#   file         : test_dump_config_output.py
#   file_relpath : tests/cli/test_dump_config_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `packlog dump-config`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import tomlkit

from packlog.cli.commands.dump_config import BEGIN_MARKER, END_MARKER
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _toml_between_markers(output: str) -> dict[str, Any]:
    lines = output.splitlines()
    start = lines.index(BEGIN_MARKER)
    end = lines.index(END_MARKER)
    return tomlkit.parse("\n".join(lines[start + 1 : end])).unwrap()


@mark_cli
def test_defaults(tmp_path: Path) -> None:
    """It should dump the defaults as TOML between markers."""
    result = run_cli_in(tmp_path, ["dump-config"])

    assert_SUCCESS(result)
    data = _toml_between_markers(result.stdout)
    assert data["input"] == {"delimiter": ","}
    assert data["output"] == {"format": "text", "aggregate": False}
    assert data["filter"] == {"events": []}
    assert data["config_files"] == ["<CLI overrides>"]


@mark_cli
def test_merges_file_and_cli_overrides(tmp_path: Path) -> None:
    """It should show file values with CLI options layered on top."""
    (tmp_path / "packlog.toml").write_text(
        '[output]\nformat = "ndjson"\n[filter]\nevents = ["messages"]\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["dump-config", "--aggregate", "-f", "builds"])

    assert_SUCCESS(result)
    data = _toml_between_markers(result.stdout)
    assert data["output"] == {"format": "ndjson", "aggregate": True}
    assert data["filter"] == {"events": ["builds"]}
    assert data["config_files"][0].endswith("packlog.toml")


@mark_cli
def test_format_selects_rendering_only(tmp_path: Path) -> None:
    """It should render JSON without recording --format as an override."""
    result = run_cli_in(tmp_path, ["dump-config", "--format", "json"])

    assert_SUCCESS(result)
    doc: dict[str, Any] = json.loads(result.stdout)
    assert doc["config"]["output"]["format"] == "text"
    assert doc["config_diagnostics"]["diagnostics"] == []


@mark_cli
def test_ndjson_includes_diagnostics(tmp_path: Path) -> None:
    """It should emit the config record then one record per diagnostic."""
    (tmp_path / "packlog.toml").write_text("[colors]\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["dump-config", "--format", "ndjson"])

    assert_SUCCESS(result)
    kinds = [json.loads(line)["kind"] for line in result.stdout.splitlines()]
    assert kinds == ["config", "diagnostic"]
    assert result.stderr == ""


@mark_cli
def test_markdown(tmp_path: Path) -> None:
    """It should wrap the TOML in a fenced block."""
    result = run_cli_in(tmp_path, ["dump-config", "--format", "markdown"])

    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert lines[0] == "# PackLog configuration"
    assert "```toml" in lines
    assert lines[-1] == "```"
