# topmark:header:start
#
#   project      : LintDiffLine
#   file         : partition.py
#   file_relpath : src/lintdiffline/report/partition.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Split results into new and existing diagnostics and merge their reports.

The run operates in one of two modes, decided once from the whole input:

- **lineOnly**: the caller already filtered the results down to new lines. The
  whole input is rendered once as the "new" subset, without banners.
- **fullFile**: every file carries all of its diagnostics; messages flagged as
  being on a new line are split out per file. Both subsets are rendered and
  wrapped in "Existing" / "NEW" banners.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from lintdiffline.config.logging import get_logger
from lintdiffline.rendering.renderer import AggregateReport, build_result
from lintdiffline.results.model import FormatMode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintdiffline.config.logging import LintDiffLineLogger
    from lintdiffline.results.model import DiagnosticMessage, FileResult

logger: LintDiffLineLogger = get_logger(__name__)

BANNER_RULE: Final[str] = " --------------------------------- "
EXISTING_TITLE: Final[str] = "Existing Lint Errors"
NEW_TITLE: Final[str] = "NEW Lint Errors"
NO_NEW_TITLE: Final[str] = "No NEW Lint Errors! Nice."


class MergePolicy(str, Enum):
    """How counts of the new and existing reports combine into the final totals.

    Attributes:
        SUM: Add both reports' counts.
        FIRST_NONZERO: Per count, take the new report's value when nonzero,
            otherwise the existing report's. Matches the historical lint-diff
            reporter output.
    """

    SUM = "sum"
    FIRST_NONZERO = "first-nonzero"


@dataclass(frozen=True)
class PartitionedResults:
    """File results split by line novelty."""

    new: list[FileResult]
    existing: list[FileResult]


def determine_format_mode(results: Sequence[FileResult]) -> FormatMode:
    """Return lineOnly if any result declares it, otherwise fullFile."""
    if any(r.format_mode == FormatMode.LINE_ONLY for r in results):
        return FormatMode.LINE_ONLY
    return FormatMode.FULL_FILE


def partition_results(results: Sequence[FileResult]) -> PartitionedResults:
    """Split each file's messages into new-line and existing diagnostics.

    A file with at least one new-line message yields two derived results with
    the same path: one holding the new-line messages, one holding the rest
    (possibly none). A file without new-line messages goes to `existing` as is.

    Args:
        results: Full-file results in input order.

    Returns:
        PartitionedResults: The new and existing subsets, each in input order.
    """
    new: list[FileResult] = []
    existing: list[FileResult] = []
    for result in results:
        new_messages: list[DiagnosticMessage] = [m for m in result.messages if m.new_line]
        if new_messages:
            new.append(result.with_messages(new_messages))
            existing.append(result.with_messages(m for m in result.messages if not m.new_line))
        else:
            existing.append(result)
    logger.debug("Partitioned %d file(s): %d with new-line diagnostics", len(results), len(new))
    return PartitionedResults(new=new, existing=existing)


def merge_reports(
    new: AggregateReport,
    existing: AggregateReport,
    policy: MergePolicy = MergePolicy.SUM,
    *,
    output: str = "",
) -> AggregateReport:
    """Combine the counts and colors of two reports.

    Args:
        new: Report for diagnostics on new lines.
        existing: Report for diagnostics on existing lines.
        policy: How to combine each count.
        output: Output text of the merged report.

    Returns:
        AggregateReport: Merged counts, red if either input is red.
    """

    def combine(a: int, b: int) -> int:
        if policy == MergePolicy.FIRST_NONZERO:
            return a or b or 0
        return a + b

    return AggregateReport(
        output=output,
        error_count=combine(new.error_count, existing.error_count),
        warning_count=combine(new.warning_count, existing.warning_count),
        fixable_error_count=combine(new.fixable_error_count, existing.fixable_error_count),
        fixable_warning_count=combine(new.fixable_warning_count, existing.fixable_warning_count),
        summary_color=new.summary_color.escalate(existing.summary_color),
    )


def banner(title: str, body: str = "") -> str:
    """Return `body` preceded by a ruled banner showing `title`."""
    return f"\n{BANNER_RULE}\n {title} \n{BANNER_RULE.rstrip()}{body}"


def assemble_full_file_output(new: AggregateReport, existing: AggregateReport) -> str:
    """Return the existing block (if any) followed by the new block."""
    existing_block: str = (
        f"{banner(EXISTING_TITLE, existing.output)} \n\n" if existing.output else ""
    )
    new_block: str = (
        f"{banner(NEW_TITLE, new.output)}\n\n" if new.output else f"{banner(NO_NEW_TITLE)}\n\n"
    )
    return existing_block + new_block


def get_output(
    results: Sequence[FileResult],
    *,
    merge_policy: MergePolicy = MergePolicy.SUM,
) -> AggregateReport:
    """Render all results and merge them into one report.

    Args:
        results: All file results of the run.
        merge_policy: How to combine the new and existing counts.

    Returns:
        AggregateReport: Final output text (banners and tables) with merged
        counts and color.
    """
    mode: FormatMode = determine_format_mode(results)
    logger.debug("Format mode: %s", mode.value)

    if mode == FormatMode.LINE_ONLY:
        new_report: AggregateReport = build_result(results)
        existing_report: AggregateReport = build_result([])
        output: str = f"{new_report.output}\n\n"
    else:
        parts: PartitionedResults = partition_results(results)
        new_report = build_result(parts.new)
        existing_report = build_result(parts.existing)
        output = assemble_full_file_output(new_report, existing_report)

    return merge_reports(new_report, existing_report, merge_policy, output=output)
