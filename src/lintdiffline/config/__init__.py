# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Runtime configuration helpers (logging setup)."""

from __future__ import annotations
