# topmark:header:start
#
#   project      : PackLog
#   file         : version.py
#   file_relpath : src/packlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PackLog `version` command.

Prints the current PackLog version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from packlog.cli.cmd_common import get_effective_verbosity
from packlog.cli.console import get_console_safely
from packlog.cli.machine_emitters import emit_machine
from packlog.cli.options import CONTEXT_SETTINGS, output_format_option
from packlog.constants import PACKLOG_VERSION
from packlog.core.formats import OutputFormat
from packlog.core.machine.schemas import MachineKey, MachineKind, build_meta_payload
from packlog.core.machine.serializers import serialize_json_envelope, serialize_ndjson_record
from packlog.core.machine.shapes import build_ndjson_record

if TYPE_CHECKING:
    from packlog.cli.console import ConsoleLike
    from packlog.core.machine.schemas import MetaPayload


@click.command(
    name="version",
    help="Show the current version of PackLog.",
    context_settings=CONTEXT_SETTINGS,
)
@output_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of PackLog.

    Args:
        output_format (OutputFormat | None): Optional output format; plain text
            when omitted.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console_safely()
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    meta: MetaPayload = build_meta_payload()
    payload: dict[str, str] = {MachineKey.VERSION: PACKLOG_VERSION}

    match fmt:
        case OutputFormat.JSON:
            emit_machine(
                serialize_json_envelope(meta, **{MachineKey.VERSION_INFO: payload}), nl=False
            )
        case OutputFormat.NDJSON:
            record = build_ndjson_record(
                kind=MachineKind.VERSION,
                meta=meta,
                container_key=MachineKey.VERSION_INFO,
                payload=payload,
            )
            emit_machine(serialize_ndjson_record(record))
        case OutputFormat.MARKDOWN:
            console.print("# PackLog Version\n")
            console.print(f"**PackLog version: {PACKLOG_VERSION}**")
        case OutputFormat.TEXT:
            if vlevel <= logging.INFO:
                console.print(console.styled("PackLog version:", bold=True, underline=True))
                console.print(f"    {console.styled(PACKLOG_VERSION, bold=True)}")
            else:
                console.print(console.styled(PACKLOG_VERSION, bold=True))
