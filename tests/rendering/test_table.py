# topmark:header:start
#
#   project      : LintDiffLine
#   file         : test_table.py
#   file_relpath : tests/rendering/test_table.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Tests for column alignment in `lintdiffline.rendering.table`."""

from __future__ import annotations

from lintdiffline.rendering.table import render_table, visible_length


def test_left_alignment_is_default() -> None:
    """Columns without hints pad on the right; trailing spaces are trimmed."""
    text = render_table([["a", "bb"], ["ccc", "d"]])
    assert text == "a    bb\nccc  d"


def test_right_and_left_alignment() -> None:
    """Right-aligned columns pad on the left."""
    text = render_table([["", 1, 2, "x"], ["", 10, 20, "y"]], align=("", "r", "l"))
    assert text.split("\n") == [
        "   1  2   x",
        "  10  20  y",
    ]


def test_empty_rows() -> None:
    """No rows render to an empty string."""
    assert render_table([]) == ""


def test_custom_separator() -> None:
    """The separator is placed between every pair of cells."""
    assert render_table([["a", "b", "c"]], separator=" | ") == "a | b | c"


def test_visible_length_ignores_ansi() -> None:
    """Escape sequences do not count towards width."""
    assert visible_length("\x1b[31merror\x1b[39m") == 5
    assert visible_length("plain") == 5


def test_styled_cells_align_by_visible_width() -> None:
    """A styled cell is padded as if its escape codes were absent."""
    styled = "\x1b[31merror\x1b[39m"
    text = render_table([[styled, "x"], ["warning", "y"]], string_length=visible_length)
    first, second = text.split("\n")
    assert first == f"{styled}    x"
    assert second == "warning  y"
