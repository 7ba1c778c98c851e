# topmark:header:start
#
#   project      : PackLog
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `packlog.config.logging`."""

from __future__ import annotations

import logging

import pytest

from packlog.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("raw", "level"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("loud", None),
    ],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, level: int | None) -> None:
    """It should parse level names and numbers from the environment."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == level


def test_env_log_level_unset() -> None:
    """It should return None when the variable is not set."""
    assert resolve_env_log_level() is None


def test_logger_has_trace() -> None:
    """It should expose a `trace` method on PackLog loggers."""
    logger = get_logger("packlog.tests")
    assert callable(logger.trace)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
