# topmark:header:start
#
#   project      : PackLog
#   file         : machine.py
#   file_relpath : src/packlog/config/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable output for the effective configuration (``dump-config``).

Shapes:
    - JSON: ``{"meta": ..., "config": <config>, "config_diagnostics": <diags>}``
    - NDJSON: one ``config`` record, then one ``diagnostic`` record per
      config diagnostic.

The config payload is the same mapping that is rendered as TOML
(`Config.to_toml_dict`), so both renderings stay in sync.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from packlog.core.formats import OutputFormat
from packlog.core.machine.schemas import MachineKey, MachineKind
from packlog.core.machine.serializers import iter_ndjson_strings, serialize_json_object
from packlog.core.machine.shapes import build_json_envelope, build_ndjson_record

if TYPE_CHECKING:
    from collections.abc import Iterator

    from packlog.config.model import Config
    from packlog.core.machine.schemas import MetaPayload


def build_config_payload(config: Config) -> dict[str, Any]:
    """Return the config payload (the TOML-shaped mapping)."""
    return config.to_toml_dict()


def build_config_diagnostics_payload(config: Config) -> dict[str, Any]:
    """Return counts per level plus the full diagnostic list."""
    counts: dict[str, int] = {}
    for d in config.diagnostics:
        counts[d.level.value] = counts.get(d.level.value, 0) + 1
    return {
        "diagnostic_counts": counts,
        "diagnostics": [d.to_dict() for d in config.diagnostics],
    }


def iter_config_ndjson_records(
    *,
    meta: MetaPayload,
    config: Config,
) -> Iterator[dict[str, object]]:
    """Yield the ``config`` record followed by one ``diagnostic`` record per entry."""
    yield build_ndjson_record(
        kind=MachineKind.CONFIG,
        meta=meta,
        payload=build_config_payload(config),
    )
    for d in config.diagnostics:
        yield build_ndjson_record(kind=MachineKind.DIAGNOSTIC, meta=meta, payload=d)


def serialize_config(
    *,
    meta: MetaPayload,
    config: Config,
    fmt: OutputFormat,
) -> str | Iterator[str]:
    """Serialize the effective configuration.

    Args:
        meta: Metadata payload (tool/version).
        config: The effective configuration.
        fmt: ``JSON`` or ``NDJSON``.

    Returns:
        A JSON document, or an iterator of NDJSON lines (no trailing newlines).

    Raises:
        ValueError: If `fmt` is not a machine format.
    """
    if fmt == OutputFormat.JSON:
        envelope: dict[str, object] = build_json_envelope(
            meta=meta,
            **{
                MachineKey.CONFIG: build_config_payload(config),
                MachineKey.CONFIG_DIAGNOSTICS: build_config_diagnostics_payload(config),
            },
        )
        return serialize_json_object(envelope)
    if fmt == OutputFormat.NDJSON:
        return iter_ndjson_strings(iter_config_ndjson_records(meta=meta, config=config))
    raise ValueError(f"Unsupported machine output format: {fmt!r}")
