# topmark:header:start
#
#   project      : PackLog
#   file         : machine_emitters.py
#   file_relpath : src/packlog/cli/machine_emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI helpers for emitting machine-readable output.

This module is Click/console-aware and is responsible only for writing already
rendered machine-output strings (JSON or NDJSON) to the active ConsoleLike.

All shaping and serialization lives in `packlog.core.machine` and the domain
``machine`` modules (`packlog.events.machine`, `packlog.config.machine`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packlog.cli.console import get_console_safely
from packlog.config.machine import serialize_config
from packlog.core.formats import OutputFormat, is_machine_format
from packlog.events.machine import (
    serialize_event_ndjson,
    serialize_events_json,
    serialize_summary,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from packlog.cli.console import ConsoleLike
    from packlog.config.model import Config
    from packlog.core.machine.schemas import MetaPayload
    from packlog.events.aggregate import LogSummary
    from packlog.events.model import Event


def emit_machine(
    serialized: str | Iterable[str],
    *,
    nl: bool = True,
) -> None:
    """Emit the serialized machine format to the ConsoleLike.

    Args:
        serialized: The serialized machine data to emit.
        nl: If True (default), emit a newline at the end of each line.
    """
    if not serialized:
        return

    console: ConsoleLike = get_console_safely()
    if isinstance(serialized, str):
        console.print(serialized, nl=nl)
    else:
        for line in serialized:
            console.print(line, nl=nl)


def emit_event_ndjson(*, meta: MetaPayload, event: Event) -> None:
    """Emit one event as an NDJSON line, as soon as it is decoded."""
    emit_machine(serialize_event_ndjson(meta=meta, event=event))


def emit_events_json(*, meta: MetaPayload, events: Iterable[Event]) -> None:
    """Emit every collected event as one JSON document (no trailing newline)."""
    emit_machine(serialize_events_json(meta=meta, events=events), nl=False)


def emit_summary_machine(*, meta: MetaPayload, summary: LogSummary, fmt: OutputFormat) -> None:
    """Emit an aggregated summary.

    Raises:
        ValueError: if `fmt` is not a machine format.
    """
    if not is_machine_format(fmt):
        raise ValueError(f"Unsupported machine output format: {fmt!r}")

    # Do not emit trailing newline for JSON
    nl: bool = fmt != OutputFormat.JSON
    emit_machine(serialize_summary(meta=meta, summary=summary, fmt=fmt), nl=nl)


def emit_config_machine(*, meta: MetaPayload, config: Config, fmt: OutputFormat) -> None:
    """Emit the effective Config in a machine-readable format.

    Shapes:
        - JSON: ``{"meta": ..., "config": ..., "config_diagnostics": ...}``.
        - NDJSON: a ``config`` record then one ``diagnostic`` record per entry.

    Raises:
        ValueError: if `fmt` is not a machine format.
    """
    if not is_machine_format(fmt):
        raise ValueError(f"Unsupported machine output format: {fmt!r}")

    serialized: str | Iterator[str] = serialize_config(meta=meta, config=config, fmt=fmt)
    nl: bool = fmt != OutputFormat.JSON
    emit_machine(serialized, nl=nl)
