# topmark:header:start
#
#   project      : LintDiffLine
#   file         : colored_enum.py
#   file_relpath : src/lintdiffline/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Color-aware enum primitives for the terminal report.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and the
      name of a chalk style chain. The enum `.value` remains a plain string;
      the colorizer is exposed via `.color`.

A `ChalkBuilder` keeps the color mode that was active when it was built, so
members store the style chain (``"yellow.bold"``) and `.color` builds it from
`chalk` on each access. Changing the mode with `chalk.set_color_mode()` then
applies to every member.

Example:
    ```python
    class Label(ColoredStrEnum):
        ERROR = ("error", "red")

    print(Label.ERROR.value)          # 'error'
    print(Label.ERROR.render())       # red "error"
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments. Defaults to a single space.

        Returns:
            str: The decorated string.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated chalk style.

    The style is kept out of `_value_` so hashing, equality and `repr` follow
    the plain string value.
    """

    _value_: str
    _style: str

    def __new__(cls, text: str, style: str) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member.
            style (str): Dotted chain of `chalk` attributes, e.g. ``"red.bold"``.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._style = style
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return a colorizer for this member built in the current chalk mode."""
        return reduce(getattr, self._style.split("."), chalk)

    def render(self) -> str:
        """Return the member's value colorized with its style."""
        return self.color(self._value_)
