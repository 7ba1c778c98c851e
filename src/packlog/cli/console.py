# topmark:header:start
#
#   project      : PackLog
#   file         : console.py
#   file_relpath : src/packlog/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for the PackLog CLI.

Decoded events, warnings and errors meant for the user go through a
`ConsoleLike`; `logging` is reserved for internal diagnostics. The ``packlog``
group stores a `ClickConsole` in ``ctx.obj["console"]`` and commands fetch it
with `get_console_safely`.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands and emitters need from a console."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled for the terminal, or unchanged without color."""
        ...


class ClickConsole:
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): If True, keep ANSI styling; otherwise Click strips it.
        out (TextIO | None): Stream for standard output. Defaults to the
            ``sys.stdout`` current at write time.
        err (TextIO | None): Stream for warnings and errors. Defaults to the
            ``sys.stderr`` current at write time.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
    """

    enable_color: bool

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        """Stream for standard output."""
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        """Stream for warnings and errors."""
        return self._err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning (yellow when color is enabled) to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error (bright red when color is enabled) to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` passed through `click.style`, or unchanged without color.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for `click.style` (``fg``,
                ``bold``, ``underline``...).

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


def get_console_safely() -> ConsoleLike:
    """Return the console of the active ``packlog`` invocation.

    Outside a Click command (library use, tests) a colorless `ClickConsole`
    on the current standard streams is returned instead.
    """
    ctx: click.Context | None = click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)
