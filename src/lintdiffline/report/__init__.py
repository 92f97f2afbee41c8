# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Report assembly: new/existing partitioning, count merging and the summary."""

from __future__ import annotations

from lintdiffline.report.formatter import format_report, format_results, pluralize
from lintdiffline.report.partition import MergePolicy, determine_format_mode, get_output

__all__ = [
    "MergePolicy",
    "determine_format_mode",
    "format_report",
    "format_results",
    "get_output",
    "pluralize",
]
