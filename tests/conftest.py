# topmark:header:start
#
#   project      : PackLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PackLog test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small builders shared by the decoder tests.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `packlog.config.model.MutableConfig`, then `freeze()` them.
    Do **not** mutate a frozen `Config`; use `Config.thaw()` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from packlog.config import logging
from packlog.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from packlog.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_packlog_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PackLog's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    PACKLOG_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def artifact_lines(
    build: str,
    slot: int,
    *,
    builder_id: str = "pkgA",
    artifact_id: str = "",
    string: str = "desc",
    files: Sequence[str] = ("out.bin",),
    timestamp: str = "0",
) -> list[str]:
    """Return the complete, in-order sub-lines describing one artifact.

    Args:
        build (str): The build name.
        slot (int): The artifact slot in the build.
        builder_id (str): Builder id token.
        artifact_id (str): Artifact id token (empty means "no id").
        string (str): Description token.
        files (Sequence[str]): File names, listed in slot order.
        timestamp (str): Timestamp token used on every line.

    Returns:
        list[str]: Raw input lines (no terminators).
    """
    prefix: str = f"{timestamp},{build},artifact,{slot}"
    lines: list[str] = [
        f"{prefix},builder-id,{builder_id}",
        f"{prefix},id,{artifact_id}",
        f"{prefix},string,{string}",
        f"{prefix},files-count,{len(files)}",
    ]
    lines.extend(f"{prefix},file,{i},{name}" for i, name in enumerate(files))
    lines.append(f"{prefix},end")
    return lines


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
