# topmark:header:start
#
#   project      : PackLog
#   file         : dump_config.py
#   file_relpath : src/packlog/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PackLog `dump-config` command.

Emits the effective PackLog configuration after applying defaults, the project
config file, ``--config`` files and any CLI overrides. In text format the TOML
is wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers for easy
parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from packlog.cli.cmd_common import get_effective_verbosity, report_config_diagnostics
from packlog.cli.config_resolver import resolve_config_from_click
from packlog.cli.console import get_console_safely
from packlog.cli.machine_emitters import emit_config_machine
from packlog.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    decode_output_options,
)
from packlog.config.io import to_toml
from packlog.config.logging import get_logger
from packlog.core.formats import OutputFormat, is_machine_format
from packlog.core.machine.schemas import build_meta_payload

if TYPE_CHECKING:
    from packlog.cli.console import ConsoleLike
    from packlog.config.logging import PacklogLogger
    from packlog.config.model import Config
    from packlog.events.model import EventCategory

logger: PacklogLogger = get_logger(__name__)

BEGIN_MARKER = "# === BEGIN ==="
END_MARKER = "# === END ==="


@click.command(
    name="dump-config",
    help=(
        "Dump the final merged PackLog configuration. "
        "Accepts the same options as 'decode'; they show up as overrides. "
        "--format selects the rendering of the dump itself: TOML for text and "
        "markdown, an envelope for json/ndjson."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@decode_output_options
@common_config_options
def dump_config_command(
    *,
    output_format: OutputFormat | None,
    aggregate: bool | None,
    events: tuple[EventCategory, ...],
    delimiter: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Dump the final merged configuration.

    Args:
        output_format: Rendering of the dump (not stored as an override).
        aggregate: ``--aggregate/--no-aggregate`` override.
        events: ``--filter`` categories.
        delimiter: ``--delimiter`` override.
        no_config: If True, skip project config discovery.
        config_paths: Extra config files, merged in order.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console_safely()

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        delimiter=delimiter,
        aggregate=aggregate,
        events=events,
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        emit_config_machine(meta=build_meta_payload(), config=config, fmt=fmt)
        return

    report_config_diagnostics(config, console, verbosity=get_effective_verbosity(ctx))
    merged: str = to_toml(config.to_toml_dict())
    if fmt == OutputFormat.MARKDOWN:
        console.print("# PackLog configuration\n")
        console.print("```toml")
        console.print(merged, nl=False)
        console.print("```")
        return

    console.print(BEGIN_MARKER)
    console.print(merged, nl=False)
    console.print(END_MARKER)
