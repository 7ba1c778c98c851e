# topmark:header:start
#
#   project      : PackLog
#   file         : diagnostics.py
#   file_relpath : src/packlog/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives shared by the config layer and the CLI.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticLog: mutable, ordered collection of diagnostics.

Diagnostics describe problems in *user input other than the build log* (for
example an invalid value in ``packlog.toml``). They never abort processing;
malformed build-log input is reported through `packlog.decoder.errors` instead.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from packlog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packlog.config.logging import PacklogLogger

logger: PacklogLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered by importance: ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {"level": self.level.value, "message": self.message}


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics."""
        return cls(items=list(diagnostics))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def extend(self, other: Iterable[Diagnostic]) -> None:
        """Append every diagnostic from ``other``, preserving order."""
        for diagnostic in other:
            self._add(diagnostic)
