# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/results/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Diagnostic result records and their loaders.

`lintdiffline.results.model` holds the immutable records the formatter works
on; `lintdiffline.results.loaders` converts linter JSON output into them.
"""

from __future__ import annotations

from lintdiffline.results.model import DiagnosticMessage, FileResult, FormatMode, Severity

__all__ = [
    "DiagnosticMessage",
    "FileResult",
    "FormatMode",
    "Severity",
]
