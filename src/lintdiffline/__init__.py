# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""LintDiffLine package.

LintDiffLine renders linter results as a terminal report that keeps diagnostics
on newly introduced lines apart from those on pre-existing lines, so a reviewer
can focus on what a change introduced.

Example:
    ```python
    from lintdiffline import format_results, parse_results_json

    print(format_results(parse_results_json(eslint_json_text)), end="")
    ```
"""

from __future__ import annotations

from lintdiffline.report import MergePolicy, format_results
from lintdiffline.results.loaders import load_results, parse_results_json
from lintdiffline.results.model import DiagnosticMessage, FileResult, FormatMode, Severity

__all__ = [
    "DiagnosticMessage",
    "FileResult",
    "FormatMode",
    "MergePolicy",
    "Severity",
    "format_results",
    "load_results",
    "parse_results_json",
]
