# topmark:header:start
#
#   project      : PackLog
#   file         : options.py
#   file_relpath : src/packlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for PackLog.

This module centralizes reusable options (verbosity, color, config, decode
output) and their resolution logic, so commands and groups can stay thin. The
helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from packlog.cli.cli_types import EnumChoiceParam, EventFilterParam
from packlog.cli.errors import PacklogUsageError
from packlog.config.logging import TRACE_LEVEL, get_logger
from packlog.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Callable

    from packlog.config.logging import PacklogLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: PacklogLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a `logging` level integer.

    Raises:
        PacklogUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags map to TRACE, two to DEBUG, one to INFO.
        One or more -q flags map to ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PacklogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


#: Click context settings shared by every command.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output (warnings about incomplete builds).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: JSON and NDJSON are always colorless.
        2. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        3. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        4. **Auto**: ``stdout.isatty()``.

    Args:
        cli_mode: Explicit color mode from CLI options; ``None`` means not provided.
        output_format: Output format, if already known.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Examples:
        >>> resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None)
        False
        >>> resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.NDJSON)
        False
    """
    if output_format in {OutputFormat.JSON, OutputFormat.NDJSON}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError, OSError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def trap_underscored_option(ctx: click.Context, param: click.Parameter, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --no_config).

    Runs during option parsing (is_eager=True) so we can show a friendly hint
    instead of the generic "No such option" error.
    """
    name: str | None = getattr(param, "name", None)
    src: ParameterSource | None = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad: str = param.opts[0] if param.opts else "--?"
    suggestion: str = bad.replace("_", "-")
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {suggestion}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so Click's parameter source
    tracking does not overlap with the real option's destination.

    Args:
        *names: One or more underscored long option names to trap,
            e.g. "--no_config".

    Returns:
        A decorator compatible with Click's option stacking.

    Raises:
        ValueError: If no option name is given.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    first: str = names[0]
    dest: str = f"_trap_{first.lstrip('-').replace('-', '_')}"

    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore packlog.toml / pyproject.toml in the working directory.",
    )(f)
    f = underscored_trap_option("--no_config")(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge, in order.",
    )(f)

    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` (an `OutputFormat`, default taken from config).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def decode_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the ``decode`` output options.

    Adds ``--format``, ``-a/--aggregate/--no-aggregate``, ``-f/--filter`` and
    ``--delimiter``. Every option defaults to ``None`` (or empty) so that an
    omitted flag leaves the configured value in place.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = output_format_option(f)
    f = click.option(
        "-a",
        "--aggregate/--no-aggregate",
        "aggregate",
        default=None,
        help="Emit one aggregated document at end of input instead of streaming events.",
    )(f)
    f = click.option(
        "-f",
        "--filter",
        "events",
        type=EventFilterParam(),
        multiple=True,
        help="Only emit these event categories (builds, artifacts, messages); repeatable.",
    )(f)
    f = click.option(
        "--delimiter",
        "delimiter",
        type=str,
        default=None,
        metavar="CHAR",
        help="Token separator of the build log (default: ',').",
    )(f)
    return f
