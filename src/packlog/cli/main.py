# topmark:header:start
#
#   project      : PackLog
#   file         : main.py
#   file_relpath : src/packlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the ``packlog`` command-line tool.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed
  into ``ctx.obj``.
- Subcommands read the shared console from ``ctx.obj`` and emit all
  user-facing output through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from packlog.cli.commands.decode import decode_command
from packlog.cli.commands.dump_config import dump_config_command
from packlog.cli.commands.version import version_command
from packlog.cli.console import ClickConsole
from packlog.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from packlog.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from packlog.cli.console import ConsoleLike
    from packlog.config.logging import PacklogLogger

logger: PacklogLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    if "console" not in ctx.obj:
        ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="PackLog: decode machine-readable build logs into events.",
)
@click.version_option(package_name="packlog", prog_name="packlog")
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the PackLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'packlog decode [INPUT]' to decode a build log.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(decode_command)

cli.add_command(version_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
