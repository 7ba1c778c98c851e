# topmark:header:start
#
#   project      : PackLog
#   file         : colored_enum.py
#   file_relpath : src/packlog/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` stores a plain textual value (the token as it appears in the
build log, e.g. ``"say"``) while carrying a colorizer used by the text
emitters. The enum `.value` remains a plain string, so members compare equal
to the raw log tokens they were parsed from.

Example:
    ```python
    from yachalk import chalk

    class Severity(ColoredStrEnum):
        OK    = ("ok", chalk.green)
        ERROR = ("error", chalk.red_bright)

    print(Severity.OK.value)            # 'ok'
    print(Severity.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`. PackLog calls colorizers
    with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def paint(self, text: str, *, enable_color: bool) -> str:
        """Return ``text`` decorated with this member's color when enabled.

        Args:
            text (str): The text to decorate.
            enable_color (bool): If False, ``text`` is returned unchanged.

        Returns:
            str: The (optionally) colorized text.
        """
        return self._color(text) if enable_color else text
