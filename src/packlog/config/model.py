# topmark:header:start
#
#   project      : PackLog
#   file         : model.py
#   file_relpath : src/packlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for PackLog.

`MutableConfig` collects settings from layered sources and `Config` is the
immutable snapshot the decode command runs with.

Precedence (lowest → highest):
    1. Runtime defaults (`packlog.config.io.load_defaults_dict`).
    2. The discovered project file in the working directory: ``packlog.toml``,
       else the ``[tool.packlog]`` table of ``pyproject.toml``.
    3. Each explicit ``--config FILE``, in order.
    4. CLI overrides via `MutableConfig.apply_cli_args`.

Invalid values never abort loading: they are recorded as diagnostics (and logged
as warnings) and the layer's value is left unset so lower layers win.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from packlog.config.io import (
    check_unknown_keys,
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from packlog.config.keys import Toml
from packlog.config.logging import PacklogLogger, get_logger
from packlog.constants import CLI_OVERRIDE_STR, PACKLOG_TOML_NAME, PYPROJECT_TOML_NAME
from packlog.core.diagnostics import Diagnostic, DiagnosticLog
from packlog.core.formats import OutputFormat
from packlog.decoder.tokens import DEFAULT_DELIMITER
from packlog.events.model import EventCategory

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: PacklogLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for PackLog.

    This snapshot is produced by `MutableConfig.freeze` after merging defaults,
    the project file, extra config files, and CLI overrides.

    Attributes:
        config_files (tuple[Path | str, ...]): Paths or identifiers of the config
            sources that contributed, in merge order.
        delimiter (str): Single-character token separator of the build log.
        output_format (OutputFormat): Output format of the decode command.
        aggregate (bool): Emit one aggregated document at EOF instead of streaming.
        events (tuple[EventCategory, ...]): Event categories to emit; empty means all.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading config.
    """

    config_files: tuple[Path | str, ...]
    delimiter: str
    output_format: OutputFormat
    aggregate: bool
    events: tuple[EventCategory, ...]
    diagnostics: tuple[Diagnostic, ...]

    def wants(self, category: EventCategory) -> bool:
        """Return True if events of ``category`` pass the configured filter."""
        return not self.events or category in self.events

    def to_toml_dict(self) -> dict[str, Any]:
        """Convert this immutable Config into a TOML-serializable dict.

        Export-only convenience for ``dump-config``; parsing lives on the mutable side.
        """
        return {
            Toml.KEY_CONFIG_FILES: [str(p) for p in self.config_files],
            Toml.SECTION_INPUT: {
                Toml.KEY_DELIMITER: self.delimiter,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_FORMAT: self.output_format.value,
                Toml.KEY_AGGREGATE: self.aggregate,
            },
            Toml.SECTION_FILTER: {
                Toml.KEY_EVENTS: [e.value for e in self.events],
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config (mirrors `MutableConfig.freeze`)."""
        return MutableConfig(
            config_files=list(self.config_files),
            delimiter=self.delimiter,
            output_format=self.output_format,
            aggregate=self.aggregate,
            events=list(self.events),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer" so that `merge_with` can tell an
    explicit value from an absent one.

    Attributes:
        config_files (list[Path | str]): Config sources used, in merge order.
        delimiter (str | None): Token separator, from ``[input]``.
        output_format (OutputFormat | None): Output format, from ``[output]``.
        aggregate (bool | None): Aggregate mode, from ``[output]``.
        events (list[EventCategory] | None): Category filter, from ``[filter]``.
        diagnostics (DiagnosticLog): Problems found while loading this layer.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])
    delimiter: str | None = None
    output_format: OutputFormat | None = None
    aggregate: bool | None = None
    events: list[EventCategory] | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot.

        Unset values fall back to the runtime defaults.
        """
        return Config(
            config_files=tuple(self.config_files),
            delimiter=self.delimiter if self.delimiter is not None else DEFAULT_DELIMITER,
            output_format=self.output_format or OutputFormat.TEXT,
            aggregate=bool(self.aggregate),
            events=tuple(dict.fromkeys(self.events or [])),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        ``pyproject.toml`` files contribute their ``[tool.packlog]`` table only.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft, or None when a
                ``pyproject.toml`` has no ``[tool.packlog]`` table.

        Raises:
            TomlLoadError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: dict[str, Any] = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: dict[str, Any] = get_table_value(toml_data, Toml.SECTION_TOOL)
            if Toml.SECTION_PACKLOG not in tool_tbl:
                logger.debug("No [tool.packlog] table in %s", path)
                return None
            toml_data = get_table_value(tool_tbl, Toml.SECTION_PACKLOG)

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_file(cls, start: Path) -> Path | None:
        """Return the project config file in ``start``, if any.

        ``packlog.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
        counts when it has a ``[tool.packlog]`` table (checked by the caller
        through `from_toml_file`). Parent directories are not searched.

        Args:
            start (Path): Directory to look in.

        Returns:
            Path | None: The candidate file, or None.
        """
        for name in (PACKLOG_TOML_NAME, PYPROJECT_TOML_NAME):
            p: Path = start / name
            if p.is_file():
                logger.debug("Discovered config file: %s", p)
                return p
        return None

    @classmethod
    def from_toml_dict(
        cls,
        data: dict[str, Any],
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (dict[str, Any]): The parsed PackLog table.
            config_file (Path | None): Source file, recorded for provenance and
                used as the location prefix in diagnostics.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls(config_files=[config_file] if config_file else [])
        diags: DiagnosticLog = draft.diagnostics
        origin: str = f"{config_file}: " if config_file else ""

        check_unknown_keys(data, Toml.ALLOWED_KEYS, diagnostics=diags, logger=logger)

        input_tbl: dict[str, Any] = get_table_value(data, Toml.SECTION_INPUT)
        output_tbl: dict[str, Any] = get_table_value(data, Toml.SECTION_OUTPUT)
        filter_tbl: dict[str, Any] = get_table_value(data, Toml.SECTION_FILTER)
        logger.trace(
            "TOML [input]: %s [output]: %s [filter]: %s", input_tbl, output_tbl, filter_tbl
        )

        delimiter: str | None = get_string_value_or_none_checked(
            input_tbl,
            Toml.KEY_DELIMITER,
            where=f"{origin}[{Toml.SECTION_INPUT}]",
            diagnostics=diags,
            logger=logger,
        )
        if delimiter is not None and len(delimiter) != 1:
            logger.warning("Ignoring delimiter %r: must be a single character", delimiter)
            diags.add_warning(
                f"Invalid value for {origin}[{Toml.SECTION_INPUT}].{Toml.KEY_DELIMITER}: "
                f"{delimiter!r} (must be a single character)"
            )
            delimiter = None
        draft.delimiter = delimiter

        draft.output_format = get_enum_value_checked(
            output_tbl,
            Toml.KEY_FORMAT,
            OutputFormat,
            where=f"{origin}[{Toml.SECTION_OUTPUT}]",
            diagnostics=diags,
            logger=logger,
        )
        draft.aggregate = get_bool_value_or_none_checked(
            output_tbl,
            Toml.KEY_AGGREGATE,
            where=f"{origin}[{Toml.SECTION_OUTPUT}]",
            diagnostics=diags,
            logger=logger,
        )

        raw_events: list[str] | None = get_string_list_value_checked(
            filter_tbl,
            Toml.KEY_EVENTS,
            where=f"{origin}[{Toml.SECTION_FILTER}]",
            diagnostics=diags,
            logger=logger,
        )
        if raw_events is not None:
            draft.events = _parse_event_categories(
                raw_events, where=f"{origin}[{Toml.SECTION_FILTER}]", diagnostics=diags
            )

        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        extra_config_files: Iterable[str | Path] | None = None,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Load a layered configuration with clear precedence.

        Args:
            extra_config_files (Iterable[str | Path] | None): Explicit config files
                to merge after discovery, in order.
            no_config (bool): If True, skip project-file discovery.
            cwd (Path | None): Discovery directory; the process CWD when None.

        Returns:
            MutableConfig: A merged draft that callers can further override then freeze.

        Raises:
            TomlLoadError: If a discovered or explicit file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            anchor: Path = (cwd or Path.cwd()).resolve()
            discovered: Path | None = cls.discover_local_config_file(anchor)
            if discovered is not None:
                found: MutableConfig | None = cls.from_toml_file(discovered)
                if found is not None:
                    draft = draft.merge_with(found)

        for entry in extra_config_files or []:
            p: Path = entry if isinstance(entry, Path) else Path(entry)
            logger.info("Loading explicit config: %s", p)
            extra: MutableConfig | None = cls.from_toml_file(p)
            if extra is not None:
                draft = draft.merge_with(extra)
            else:
                logger.warning("Ignoring config without [tool.packlog]: %s", p)
                draft.diagnostics.add_warning(f"Ignoring config without [tool.packlog]: {p}")

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            delimiter=other.delimiter if other.delimiter is not None else self.delimiter,
            output_format=other.output_format
            if other.output_format is not None
            else self.output_format,
            aggregate=other.aggregate if other.aggregate is not None else self.aggregate,
            events=other.events if other.events is not None else self.events,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Recognized keys: ``delimiter``, ``output_format``, ``aggregate`` and
        ``events``; a ``None`` or empty value leaves the setting untouched.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("delimiter") is not None:
            self.delimiter = str(args["delimiter"])
        if args.get("output_format") is not None:
            self.output_format = args["output_format"]
        if args.get("aggregate") is not None:
            self.aggregate = bool(args["aggregate"])
        if args.get("events"):
            self.events = list(args["events"])

        logger.debug("Patched MutableConfig: %s", self)
        return self


def _parse_event_categories(
    raw: list[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[EventCategory]:
    """Convert filter names to categories, dropping (and reporting) unknown ones."""
    out: list[EventCategory] = []
    for name in raw:
        try:
            out.append(EventCategory(name))
        except ValueError:
            allowed: str = ", ".join(e.value for e in EventCategory)
            logger.warning("Ignoring unknown event category in %s: %r", where, name)
            diagnostics.add_warning(
                f"Ignoring unknown event category in {where}.{Toml.KEY_EVENTS}: "
                f"{name!r} (allowed: {allowed})"
            )
    return out
