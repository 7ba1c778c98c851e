# topmark:header:start
#
#   project      : PackLog
#   file         : test_model_export.py
#   file_relpath : tests/config/test_model_export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config` export, thawing and filtering helpers."""

from __future__ import annotations

import tomlkit

from packlog.config.io import to_toml
from packlog.config.model import Config, MutableConfig
from packlog.core.formats import OutputFormat
from packlog.events.model import EventCategory
from tests.conftest import make_config


def test_to_toml_dict_layout() -> None:
    """It should export every section with plain TOML values."""
    cfg: Config = make_config(
        output_format=OutputFormat.JSON, events=[EventCategory.BUILDS], delimiter=";"
    )
    assert cfg.to_toml_dict() == {
        "config_files": [],
        "input": {"delimiter": ";"},
        "output": {"format": "json", "aggregate": False},
        "filter": {"events": ["builds"]},
    }


def test_export_is_valid_toml() -> None:
    """It should render to TOML that parses back to the same mapping."""
    cfg = make_config(aggregate=True)
    assert tomlkit.parse(to_toml(cfg.to_toml_dict())).unwrap() == cfg.to_toml_dict()


def test_thaw_freeze_roundtrip() -> None:
    """It should reproduce an equal snapshot after thaw/freeze."""
    cfg = make_config(events=[EventCategory.MESSAGES], aggregate=True)
    assert cfg.thaw().freeze() == cfg


def test_freeze_deduplicates_events() -> None:
    """It should collapse repeated categories, keeping first occurrence order."""
    m = MutableConfig.from_defaults()
    m.events = [EventCategory.BUILDS, EventCategory.MESSAGES, EventCategory.BUILDS]
    assert m.freeze().events == (EventCategory.BUILDS, EventCategory.MESSAGES)


def test_wants() -> None:
    """It should accept everything with an empty filter, else only listed categories."""
    assert all(make_config().wants(c) for c in EventCategory)
    only_builds = make_config(events=[EventCategory.BUILDS])
    assert only_builds.wants(EventCategory.BUILDS)
    assert not only_builds.wants(EventCategory.MESSAGES)
