# topmark:header:start
#
#   project      : LintDiffLine
#   file         : __main__.py
#   file_relpath : src/lintdiffline/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Module entry point for running LintDiffLine via ``python -m lintdiffline``.

Delegates to `lintdiffline.cli.main.cli`, the same command installed as the
``lintdiffline`` console script.
"""

from __future__ import annotations

from lintdiffline.cli.main import cli

if __name__ == "__main__":
    cli()
