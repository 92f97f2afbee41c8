# topmark:header:start
#
#   project      : LintDiffLine
#   file         : renderer.py
#   file_relpath : src/lintdiffline/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Per-subset report rendering.

`build_result` turns one subset of file results (all of them, only the new
diagnostics, or only the existing ones) into an `AggregateReport`: the
concatenated per-file tables plus the summed counts and an emphasis color.

Rendering happens in two stages:

1. `render_table` lays out one row per message with aligned columns.
2. `collapse_line_column` rewrites the ``<line> <column>`` pair on every
   rendered line into a single dimmed ``line:column`` token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from yachalk import chalk

from lintdiffline.config.logging import get_logger
from lintdiffline.rendering.styles import SeverityLabel, SummaryColor
from lintdiffline.rendering.table import render_table, visible_length

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintdiffline.config.logging import LintDiffLineLogger
    from lintdiffline.results.model import DiagnosticMessage, FileResult

logger: LintDiffLineLogger = get_logger(__name__)

# Column alignment: placeholder, line (right), column (left); the rest default to left.
TABLE_ALIGN: Final[tuple[str, ...]] = ("", "r", "l")

_TRAILING_PERIOD_RE: Final[re.Pattern[str]] = re.compile(r"([^ ])\.\Z")
_LINE_COLUMN_RE: Final[re.Pattern[str]] = re.compile(r"(\d+)\s+(\d+)")


@dataclass(frozen=True)
class AggregateReport:
    """Rendered output and summed counts for one subset of file results."""

    output: str = ""
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    summary_color: SummaryColor = SummaryColor.YELLOW

    @property
    def total(self) -> int:
        """Return the number of problems (errors plus warnings)."""
        return self.error_count + self.warning_count

    @property
    def has_fixable(self) -> bool:
        """Return True if any error or warning is reported as fixable."""
        return self.fixable_error_count > 0 or self.fixable_warning_count > 0


def strip_trailing_period(message: str) -> str:
    """Remove a single trailing period that follows a non-space character.

    Args:
        message: Message text.

    Returns:
        str: `message` without its final ``.``; other periods are kept.
    """
    return _TRAILING_PERIOD_RE.sub(r"\1", message)


def collapse_line_column(line: str) -> str:
    """Merge the first ``<digits><whitespace><digits>`` run into a dim ``a:b`` token.

    Args:
        line: One rendered table line.

    Returns:
        str: The line with its first numeric pair collapsed, or unchanged if it
        has none.
    """
    return _LINE_COLUMN_RE.sub(
        lambda m: chalk.dim(f"{m.group(1)}:{m.group(2)}"),
        line,
        count=1,
    )


def _message_row(message: DiagnosticMessage) -> list[object]:
    label: SeverityLabel = SeverityLabel.ERROR if message.is_error else SeverityLabel.WARNING
    return [
        "",
        message.line,
        message.column,
        label.render(),
        strip_trailing_period(message.message),
        chalk.dim(message.rule_id) if message.rule_id else "",
    ]


def render_file_table(messages: Iterable[DiagnosticMessage]) -> str:
    """Render the aligned message table for one file.

    Args:
        messages: The file's messages in display order.

    Returns:
        str: Table text with the line/column pair collapsed on every line.
    """
    table: str = render_table(
        [_message_row(m) for m in messages],
        align=TABLE_ALIGN,
        string_length=visible_length,
    )
    return "\n".join(collapse_line_column(line) for line in table.split("\n"))


def build_result(results: Iterable[FileResult] | None) -> AggregateReport:
    """Render a subset of file results and roll up its counts.

    Files without messages are skipped entirely: no header, no counts.

    Args:
        results: File results to render, or None.

    Returns:
        AggregateReport: Rendered output, summed counts and emphasis color.
        An empty report when `results` is None or contains no messages.
    """
    if results is None:
        return AggregateReport()

    output: str = ""
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    summary_color: SummaryColor = SummaryColor.YELLOW

    for result in results:
        if not result.messages:
            logger.trace("Skipping %s: no messages", result.file_path)
            continue

        error_count += result.error_count
        warning_count += result.warning_count
        fixable_error_count += result.fixable_error_count
        fixable_warning_count += result.fixable_warning_count

        if any(m.is_error for m in result.messages):
            summary_color = SummaryColor.RED

        output += f"\n\n{chalk.underline(result.file_path)}\n"
        output += render_file_table(result.messages)
        logger.trace("Rendered %d message(s) for %s", len(result.messages), result.file_path)

    return AggregateReport(
        output=output,
        error_count=error_count,
        warning_count=warning_count,
        fixable_error_count=fixable_error_count,
        fixable_warning_count=fixable_warning_count,
        summary_color=summary_color,
    )
