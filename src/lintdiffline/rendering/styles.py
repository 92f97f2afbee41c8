# topmark:header:start
#
#   project      : LintDiffLine
#   file         : styles.py
#   file_relpath : src/lintdiffline/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Semantic styles used by the report: severity labels and summary colors."""

from __future__ import annotations

from lintdiffline.rendering.colored_enum import ColoredStrEnum


class SeverityLabel(ColoredStrEnum):
    """Label printed in the severity column of a file table."""

    ERROR = ("error", "red")
    WARNING = ("warning", "yellow")


class SummaryColor(ColoredStrEnum):
    """Emphasis color of a report.

    The colorizer is the bold variant used for the summary lines.
    Yellow escalates to red and never reverts.
    """

    YELLOW = ("yellow", "yellow.bold")
    RED = ("red", "red.bold")

    def escalate(self, other: SummaryColor) -> SummaryColor:
        """Return red if either color is red, else yellow."""
        if SummaryColor.RED in (self, other):
            return SummaryColor.RED
        return SummaryColor.YELLOW
