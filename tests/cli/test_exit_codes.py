# topmark:header:start
#
#   project      : PackLog
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: exit codes and error messages of `packlog decode`."""

from __future__ import annotations

import json
import os
import sys
from typing import TYPE_CHECKING

import pytest

from packlog.core.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_DECODE_ERROR,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_malformed_line_is_a_decode_error() -> None:
    """It should exit 65 and name the line and the problem."""
    result = run_cli(
        ["decode", "--no-config"],
        input_text="0,b1,artifact-count,1\n1,b1,artifact,0,id,x\n",
    )

    assert_DECODE_ERROR(result)
    assert "line 2: unexpected token 'id' in artifact, expected 'builder-id'" in result.stderr


@mark_cli
def test_output_before_the_error_is_kept() -> None:
    """It should have streamed the events of the lines before the failing one."""
    result = run_cli(
        ["decode", "--no-config", "--format", "ndjson"],
        input_text="1,,ui,say,ok\n2,,ui,shout,no\n",
    )

    assert_DECODE_ERROR(result)
    (line,) = result.stdout.splitlines()
    assert json.loads(line)["kind"] == "message"
    assert "unexpected global ui type: 'shout'" in result.stderr


@mark_cli
def test_json_format_emits_nothing_on_error() -> None:
    """It should not write a partial JSON document."""
    result = run_cli(
        ["decode", "--no-config", "--format", "json"], input_text="1,,ui,say,ok\n2,,bogus\n"
    )
    assert_DECODE_ERROR(result)
    assert result.stdout == ""


@mark_cli
def test_line_after_finished_build() -> None:
    """It should reject lines addressed to a finished build."""
    result = run_cli(
        ["decode", "--no-config"],
        input_text="0,b1,artifact-count,0\n1,b1,artifact-count,0\n",
    )
    assert_DECODE_ERROR(result)
    assert "already finished the build 'b1'" in result.stderr


@mark_cli
def test_invalid_utf8_is_a_decode_error(tmp_path: Path) -> None:
    """It should refuse input that is not UTF-8 text."""
    (tmp_path / "bad.log").write_bytes(b"1,,ui,say,\xff\xfe\n")

    result = run_cli_in(tmp_path, ["decode", "bad.log"])

    assert_DECODE_ERROR(result)
    assert "not valid UTF-8" in result.stderr


@mark_cli
def test_missing_input_file(tmp_path: Path) -> None:
    """It should exit 66 for a missing input file."""
    result = run_cli_in(tmp_path, ["decode", "nope.log"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "No such file: nope.log" in result.stderr


@mark_cli
@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="file permissions are not enforced",
)
def test_unreadable_input_file(tmp_path: Path) -> None:
    """It should exit 77 when the input cannot be opened."""
    path = tmp_path / "secret.log"
    path.write_text("1,,ui,say,x\n", encoding="utf-8")
    path.chmod(0)
    try:
        result = run_cli_in(tmp_path, ["decode", "secret.log"])
    finally:
        path.chmod(0o644)

    assert result.exit_code == ExitCode.PERMISSION_DENIED, result.output


@mark_cli
def test_unknown_filter_event() -> None:
    """It should exit 64 and explain that the event name is unknown."""
    result = run_cli(["decode", "--no-config", "-f", "warnings"], input_text="")

    assert_USAGE_ERROR(result)
    assert "'warnings' does not match any filterable event" in result.stderr


@mark_cli
def test_filter_is_case_sensitive() -> None:
    """It should reject a filter name in the wrong case."""
    result = run_cli(["decode", "--no-config", "-f", "Builds"], input_text="")
    assert_USAGE_ERROR(result)


@mark_cli
def test_multi_char_delimiter() -> None:
    """It should exit 64 for a delimiter longer than one character."""
    result = run_cli(["decode", "--no-config", "--delimiter", "::"], input_text="")
    assert_USAGE_ERROR(result)
    assert "single character" in result.stderr


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    """It should refuse -v together with -q."""
    result = run_cli(["-v", "-q", "decode", "--no-config"], input_text="")
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr


@mark_cli
def test_unknown_format_is_a_click_usage_error() -> None:
    """It should let Click report an invalid --format choice (exit 2)."""
    result = run_cli(["decode", "--no-config", "--format", "yaml"], input_text="")
    assert result.exit_code == 2, result.output
    assert "Invalid value 'yaml'" in result.stderr


@mark_cli
def test_underscored_option_hint() -> None:
    """It should suggest the dashed spelling of an underscored option."""
    result = run_cli(["decode", "--no_config"], input_text="")
    assert result.exit_code == 2, result.output
    assert "Did you mean --no-config?" in result.stderr


@mark_cli
def test_broken_config_file(tmp_path: Path) -> None:
    """It should exit 78 when the project config is not valid TOML."""
    (tmp_path / "packlog.toml").write_text("[output\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["decode"], input_text="")

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Cannot load config file" in result.stderr


@mark_cli
def test_missing_explicit_config(tmp_path: Path) -> None:
    """It should let Click reject a --config path that does not exist."""
    result = run_cli_in(tmp_path, ["decode", "--config", "missing.toml"], input_text="")
    assert result.exit_code == 2, result.output
