# topmark:header:start
#
#   project      : PackLog
#   file         : cli_types.py
#   file_relpath : src/packlog/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for PackLog.

- `EnumChoiceParam`: case-insensitive choice mapped onto a string-valued Enum
  (used for ``--format`` and ``--color``).
- `EventFilterParam`: case-sensitive choice of `EventCategory` for ``--filter``;
  an unknown token is a `PacklogUsageError` (exit code 64) naming the token.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from packlog.cli.errors import PacklogUsageError
from packlog.events.model import EventCategory

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Args:
        enum_cls (type[E]): The string-valued Enum to convert to.
        case_sensitive (bool): If False (default), values match regardless of case.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]
    case_sensitive: bool

    def __init__(self, enum_cls: type[E], *, case_sensitive: bool = False) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.case_sensitive = case_sensitive
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _key(self, text: str) -> str:
        return text if self.case_sensitive else text.lower()

    def fail_unknown(
        self,
        value: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter for ``value`` (clear to type checkers)."""
        raise click.BadParameter(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param=param,
            ctx=ctx,
        )

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            self._key(cast("str", getattr(choice, "value", str(choice)))): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key: str = self._key(str(value))
        if key in lookup:
            return lookup[key]

        self.fail_unknown(str(value), param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_PACKLOG_COMPLETE=bash_source packlog)"`
        Zsh: `eval "$(_PACKLOG_COMPLETE=zsh_source packlog)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import (
            CompletionItem as RuntimeCompletionItem,
        )

        prefix: str = self._key(incomplete or "")
        return [
            RuntimeCompletionItem(val) for val in self.choices if self._key(val).startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class EventFilterParam(EnumChoiceParam[EventCategory]):
    """Case-sensitive `EventCategory` choice whose failures exit with ``USAGE_ERROR``."""

    def __init__(self) -> None:
        super().__init__(EventCategory, case_sensitive=True)
        self.name = "event"

    def fail_unknown(
        self,
        value: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a `PacklogUsageError` naming the offending token."""
        raise PacklogUsageError(f"'{value}' does not match any filterable event")
