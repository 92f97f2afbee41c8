# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Command-line runner that prints a LintDiffLine report from linter JSON output."""

from __future__ import annotations
