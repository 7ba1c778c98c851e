# topmark:header:start
#
#   project      : PackLog
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for PackLog configuration discovery and precedence."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from packlog.cli.config_resolver import resolve_config_from_click
from packlog.cli.errors import PacklogConfigError, PacklogUsageError
from packlog.config.model import Config, MutableConfig
from packlog.constants import CLI_OVERRIDE_STR
from packlog.core.formats import OutputFormat
from packlog.events.model import EventCategory

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, content: str) -> None:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")


def test_defaults_without_any_file(tmp_path: Path) -> None:
    """It should freeze to the runtime defaults when no file is found."""
    cfg: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.delimiter == ","
    assert cfg.output_format is OutputFormat.TEXT
    assert cfg.aggregate is False
    assert cfg.events == ()
    assert cfg.config_files == ()
    assert cfg.diagnostics == ()


def test_packlog_toml_wins_over_pyproject(tmp_path: Path) -> None:
    """It should use packlog.toml and ignore pyproject.toml in the same directory."""
    _write(tmp_path / "pyproject.toml", '[tool.packlog.output]\nformat = "json"\n')
    _write(tmp_path / "packlog.toml", '[output]\nformat = "ndjson"\n')
    cfg = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.output_format is OutputFormat.NDJSON
    assert cfg.config_files == (tmp_path.resolve() / "packlog.toml",)


def test_pyproject_tool_table(tmp_path: Path) -> None:
    """It should read the [tool.packlog] table of pyproject.toml."""
    _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.packlog.input]
        delimiter = ";"

        [tool.packlog.filter]
        events = ["builds", "messages"]
        """,
    )
    cfg = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.delimiter == ";"
    assert cfg.events == (EventCategory.BUILDS, EventCategory.MESSAGES)


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    """It should not treat a foreign pyproject.toml as a config source."""
    _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    cfg = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.config_files == ()


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """It should ignore the local project file with no_config."""
    _write(tmp_path / "packlog.toml", "[output]\naggregate = true\n")
    cfg = MutableConfig.load_merged(cwd=tmp_path, no_config=True).freeze()
    assert cfg.aggregate is False


def test_explicit_files_merge_in_order(tmp_path: Path) -> None:
    """It should let later --config files override earlier ones and the local file."""
    _write(tmp_path / "packlog.toml", '[output]\nformat = "markdown"\naggregate = true\n')
    first = tmp_path / "a.toml"
    second = tmp_path / "b.toml"
    _write(first, '[output]\nformat = "json"\n')
    _write(second, '[output]\nformat = "ndjson"\n')

    cfg = MutableConfig.load_merged(cwd=tmp_path, extra_config_files=[first, second]).freeze()

    assert cfg.output_format is OutputFormat.NDJSON
    assert cfg.aggregate is True
    assert [str(p) for p in cfg.config_files][-2:] == [str(first), str(second)]


def test_invalid_values_become_diagnostics(tmp_path: Path) -> None:
    """It should keep lower-layer values when a file carries invalid entries."""
    _write(
        tmp_path / "packlog.toml",
        """
        [input]
        delimiter = "::"

        [output]
        format = "yaml"
        aggregate = "yes"

        [filter]
        events = ["builds", "warnings"]
        """,
    )
    cfg = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.delimiter == ","
    assert cfg.output_format is OutputFormat.TEXT
    assert cfg.aggregate is False
    assert cfg.events == (EventCategory.BUILDS,)
    messages = " | ".join(d.message for d in cfg.diagnostics)
    assert "must be a single character" in messages
    assert "'yaml'" in messages
    assert "Expected bool" in messages
    assert "'warnings'" in messages


def test_cli_overrides_win(tmp_path: Path) -> None:
    """It should apply CLI values on top of every file layer."""
    _write(tmp_path / "packlog.toml", '[output]\nformat = "json"\naggregate = true\n')
    cfg = resolve_config_from_click(
        no_config=False,
        config_paths=(),
        delimiter="\t",
        output_format=OutputFormat.TEXT,
        aggregate=False,
        events=(EventCategory.ARTIFACTS,),
        cwd=tmp_path,
    )
    assert cfg.delimiter == "\t"
    assert cfg.output_format is OutputFormat.TEXT
    assert cfg.aggregate is False
    assert cfg.events == (EventCategory.ARTIFACTS,)
    assert cfg.config_files[-1] == CLI_OVERRIDE_STR


def test_unset_cli_values_leave_file_values(tmp_path: Path) -> None:
    """It should keep file values when the matching CLI option was not given."""
    _write(tmp_path / "packlog.toml", '[filter]\nevents = ["messages"]\n')
    cfg = resolve_config_from_click(no_config=False, config_paths=(), cwd=tmp_path)
    assert cfg.events == (EventCategory.MESSAGES,)


def test_cli_delimiter_must_be_one_char(tmp_path: Path) -> None:
    """It should reject a multi-character --delimiter as a usage error."""
    with pytest.raises(PacklogUsageError, match="single character"):
        resolve_config_from_click(no_config=True, config_paths=(), delimiter=";;", cwd=tmp_path)


def test_broken_config_file_is_a_config_error(tmp_path: Path) -> None:
    """It should map an unparsable file to PacklogConfigError."""
    _write(tmp_path / "packlog.toml", "[output\n")
    with pytest.raises(PacklogConfigError, match="Cannot load config file"):
        resolve_config_from_click(no_config=False, config_paths=(), cwd=tmp_path)
