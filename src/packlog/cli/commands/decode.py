# topmark:header:start
#
#   project      : PackLog
#   file         : decode.py
#   file_relpath : src/packlog/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PackLog `decode` command.

Decodes a machine-readable build log (a file, or STDIN with ``-``) and writes
the resulting events:

* ``text`` / ``ndjson``: one line per event, written as soon as it is decoded.
* ``json`` / ``markdown``: one document after end of input.
* ``--aggregate``: one summary document after end of input, in any format.

Exit codes:
    SUCCESS (0) when the whole input decoded, DECODE_ERROR (65) on malformed
    input, FILE_NOT_FOUND (66), PERMISSION_DENIED (77) or IO_ERROR (74) when
    the input cannot be read, CONFIG_ERROR (78) for unreadable config files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from packlog.cli.cmd_common import get_effective_verbosity, report_config_diagnostics
from packlog.cli.config_resolver import resolve_config_from_click
from packlog.cli.console import get_console_safely
from packlog.cli.emitters.markdown import render_events_markdown, render_summary_markdown
from packlog.cli.emitters.text import render_event_text, render_summary_text
from packlog.cli.errors import (
    PacklogDecodeError,
    PacklogFileNotFoundError,
    PacklogIOError,
    PacklogPermissionDeniedError,
)
from packlog.cli.machine_emitters import (
    emit_event_ndjson,
    emit_events_json,
    emit_summary_machine,
)
from packlog.cli.options import CONTEXT_SETTINGS, common_config_options, decode_output_options
from packlog.config.logging import get_logger
from packlog.constants import STDIN_MARKER
from packlog.core.formats import OutputFormat, is_machine_format
from packlog.core.machine.schemas import build_meta_payload
from packlog.decoder import DecodeError, EventLog, iter_events
from packlog.events.aggregate import Aggregator

if TYPE_CHECKING:
    from packlog.cli.console import ConsoleLike
    from packlog.config.logging import PacklogLogger
    from packlog.config.model import Config
    from packlog.core.machine.schemas import MetaPayload
    from packlog.decoder import BuildDecoder
    from packlog.events.aggregate import LogSummary
    from packlog.events.model import Event, EventCategory

logger: PacklogLogger = get_logger(__name__)


def _warn_incomplete(log: EventLog, console: ConsoleLike) -> None:
    for name in log.incomplete_builds():
        decoder: BuildDecoder = log.builds[name]
        declared: int | None = decoder.declared_count
        if declared is None:
            detail: str = "artifact count never declared"
        else:
            detail = f"{decoder.completed_count}/{declared} artifact(s) complete"
        console.warn(f"warning: build '{name}' did not complete ({detail})")


@click.command(
    name="decode",
    help=(
        "Decode a machine-readable build log. INPUT is a file path; "
        "use '-' (or omit it) to read from STDIN."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("input_path", metavar="[INPUT]", required=False, default=STDIN_MARKER)
@decode_output_options
@common_config_options
def decode_command(
    *,
    input_path: str,
    output_format: OutputFormat | None,
    aggregate: bool | None,
    events: tuple[EventCategory, ...],
    delimiter: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Decode a build log and emit its events.

    Args:
        input_path: Path of the build log, or ``-`` for STDIN.
        output_format: ``--format`` override.
        aggregate: ``--aggregate/--no-aggregate`` override.
        events: ``--filter`` categories.
        delimiter: ``--delimiter`` override.
        no_config: If True, skip project config discovery.
        config_paths: Extra config files, merged in order.

    Raises:
        PacklogDecodeError: If the build log is malformed or not valid UTF-8.
        PacklogFileNotFoundError: If ``input_path`` does not exist.
        PacklogPermissionDeniedError: If ``input_path`` cannot be read.
        PacklogIOError: For any other I/O failure while reading.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console_safely()
    verbosity: int = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        delimiter=delimiter,
        output_format=output_format,
        aggregate=aggregate,
        events=events,
    )
    report_config_diagnostics(config, console, verbosity=verbosity)
    logger.debug("effective config: %s", config)

    fmt: OutputFormat = config.output_format
    enable_color: bool = console.enable_color and not is_machine_format(fmt)
    meta: MetaPayload = build_meta_payload()
    aggregator: Aggregator | None = Aggregator(config.events) if config.aggregate else None
    collected: list[Event] = []

    def on_event(event: Event) -> None:
        if aggregator is not None:
            aggregator.add(event)
            return
        if not config.wants(event.category):
            return
        match fmt:
            case OutputFormat.NDJSON:
                emit_event_ndjson(meta=meta, event=event)
            case OutputFormat.TEXT:
                console.print(render_event_text(event, enable_color=enable_color))
            case _:
                collected.append(event)

    log: EventLog = EventLog()
    try:
        with click.open_file(input_path, "r", encoding="utf-8", errors="strict") as stream:
            for event in iter_events(stream, delimiter=config.delimiter, log=log):
                on_event(event)
    except DecodeError as exc:
        raise PacklogDecodeError(f"{input_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PacklogDecodeError(f"{input_path}: not valid UTF-8 text ({exc.reason})") from exc
    except FileNotFoundError as exc:
        raise PacklogFileNotFoundError(f"No such file: {input_path}") from exc
    except PermissionError as exc:
        raise PacklogPermissionDeniedError(f"Permission denied: {input_path}") from exc
    except OSError as exc:
        raise PacklogIOError(f"Cannot read {input_path}: {exc.strerror or exc}") from exc

    if aggregator is not None:
        summary: LogSummary = aggregator.finish(log.builds)
        if is_machine_format(fmt):
            emit_summary_machine(meta=meta, summary=summary, fmt=fmt)
        elif fmt == OutputFormat.MARKDOWN:
            console.print(render_summary_markdown(summary), nl=False)
        else:
            for line in render_summary_text(summary, enable_color=enable_color):
                console.print(line)
    elif fmt == OutputFormat.JSON:
        emit_events_json(meta=meta, events=collected)
    elif fmt == OutputFormat.MARKDOWN:
        console.print(render_events_markdown(collected), nl=False)

    if verbosity < logging.ERROR:
        _warn_incomplete(log, console)
