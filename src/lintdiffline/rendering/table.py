# topmark:header:start
#
#   project      : LintDiffLine
#   file         : table.py
#   file_relpath : src/lintdiffline/rendering/table.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Plain-text column alignment for report tables.

`render_table` pads each cell to its column's widest visible value and joins
cells with a fixed separator. Width is measured by a pluggable function so that
cells carrying ANSI escape sequences line up by what the terminal shows.

Alignment hints per column:
    - ``"l"`` or ``""``: pad on the right (default for missing hints).
    - ``"r"``: pad on the left.

Trailing whitespace is trimmed from every rendered line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import click

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

DEFAULT_SEPARATOR: Final[str] = "  "


def visible_length(text: str) -> int:
    """Return the length of `text` ignoring ANSI styling."""
    return len(click.unstyle(text))


def _pad(cell: str, width: int, align: str) -> str:
    missing: int = max(width, 0)
    if align == "r":
        return " " * missing + cell
    return cell + " " * missing


def render_table(
    rows: Sequence[Sequence[object]],
    *,
    align: Sequence[str] = (),
    separator: str = DEFAULT_SEPARATOR,
    string_length: Callable[[str], int] = len,
) -> str:
    """Render `rows` as aligned, newline-joined text.

    Args:
        rows: Table rows; cells are converted with `str()`.
        align: Per-column alignment hints; columns without a hint are left-aligned.
        separator: Text placed between adjacent cells.
        string_length: Function measuring the visible width of a cell.

    Returns:
        str: The rendered table without a trailing newline. Empty for no rows.
    """
    cells: list[list[str]] = [[str(c) for c in row] for row in rows]

    widths: list[int] = []
    for row in cells:
        for ix, cell in enumerate(row):
            n: int = string_length(cell)
            if ix >= len(widths):
                widths.append(n)
            elif n > widths[ix]:
                widths[ix] = n

    lines: list[str] = []
    for row in cells:
        padded: list[str] = [
            _pad(cell, widths[ix] - string_length(cell), align[ix] if ix < len(align) else "l")
            for ix, cell in enumerate(row)
        ]
        lines.append(separator.join(padded).rstrip())
    return "\n".join(lines)
