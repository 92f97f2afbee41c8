# topmark:header:start
#
#   project      : LintDiffLine
#   file         : formatter.py
#   file_relpath : src/lintdiffline/report/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Top-level report formatter.

`format_results` is the callback a lint runner invokes with the full result
collection. It returns the whole report as one string, or an empty string when
there is nothing to report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from yachalk import chalk

from lintdiffline.config.logging import get_logger
from lintdiffline.report.partition import MergePolicy, get_output

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintdiffline.config.logging import LintDiffLineLogger
    from lintdiffline.rendering.renderer import AggregateReport
    from lintdiffline.results.model import FileResult

logger: LintDiffLineLogger = get_logger(__name__)

SUMMARY_GLYPH: Final[str] = "✖"
FIX_OPTION: Final[str] = "--fix"


def pluralize(word: str, count: int) -> str:
    """Return `word` unchanged when `count` is 1, otherwise with an ``s`` appended."""
    return word if count == 1 else f"{word}s"


def render_summary(report: AggregateReport) -> str:
    """Return the styled summary lines for `report`.

    Args:
        report: Merged report of the run.

    Returns:
        str: The problem count line, followed by the fixable line when anything
        is fixable. Empty when the report has no problems.
    """
    total: int = report.total
    if total <= 0:
        return ""

    emphasis = report.summary_color.color
    summary: str = emphasis(
        f"{SUMMARY_GLYPH} {total}{pluralize(' problem', total)}"
        f" ({report.error_count}{pluralize(' error', report.error_count)}, "
        f"{report.warning_count}{pluralize(' warning', report.warning_count)})\n"
    )

    if report.has_fixable:
        summary += emphasis(
            f"  {report.fixable_error_count}{pluralize(' error', report.fixable_error_count)}"
            f" and {report.fixable_warning_count}"
            f"{pluralize(' warning', report.fixable_warning_count)}"
            f" potentially fixable with the `{FIX_OPTION}` option.\n"
        )
    return summary


def format_results(
    results: Sequence[FileResult] | None,
    *,
    merge_policy: MergePolicy = MergePolicy.SUM,
) -> str:
    """Format a lint run as a terminal report.

    Args:
        results: All file results of the run, or None.
        merge_policy: How to combine the counts of the new and existing subsets.

    Returns:
        str: Banners, per-file tables and summary lines with outer styling
        reset, or an empty string when the run has no errors or warnings.
    """
    if not results:
        return ""
    return format_report(get_output(results, merge_policy=merge_policy))


def format_report(report: AggregateReport) -> str:
    """Append the summary to a merged report's output.

    Args:
        report: Merged report as returned by `get_output`.

    Returns:
        str: The final report text, or an empty string when `report` has no
        errors or warnings.
    """
    logger.debug(
        "Report totals: %d error(s), %d warning(s), color=%s",
        report.error_count,
        report.warning_count,
        report.summary_color.value,
    )
    if report.total <= 0:
        return ""

    # Reset styling so the report never bleeds into the caller's terminal state.
    return chalk.reset(report.output + render_summary(report))
