# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __init__.py
#   file_relpath : src/lintdiffline/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Terminal rendering for LintDiffLine.

Public modules:
    - lintdiffline.rendering.colored_enum
    - lintdiffline.rendering.renderer
    - lintdiffline.rendering.styles
    - lintdiffline.rendering.table
"""

from __future__ import annotations
