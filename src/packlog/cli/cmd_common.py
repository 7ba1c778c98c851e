# topmark:header:start
#
#   project      : PackLog
#   file         : cmd_common.py
#   file_relpath : src/packlog/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands. They avoid policy (exit
code rules) and only read shared state from ``ctx.obj``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from packlog.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    import click

    from packlog.cli.console import ConsoleLike
    from packlog.config.model import Config


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the ``packlog`` group.

    Falls back to ``logging.WARNING`` (the default level) when the command is
    invoked outside the group.
    """
    obj: object = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", logging.WARNING))
    return logging.WARNING


def report_config_diagnostics(config: Config, console: ConsoleLike, *, verbosity: int) -> None:
    """Write config diagnostics to stderr.

    Warnings and errors are shown unless ``-q`` was given; info diagnostics only
    with ``-v``.

    Args:
        config (Config): The effective configuration.
        console (ConsoleLike): Console used for output.
        verbosity (int): Effective verbosity (a `logging` level).
    """
    for d in config.diagnostics:
        if d.level == DiagnosticLevel.INFO and verbosity > logging.INFO:
            continue
        if verbosity >= logging.ERROR and d.level != DiagnosticLevel.ERROR:
            continue
        console.warn(f"config {d.level.value}: {d.message}")
