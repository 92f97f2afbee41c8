# topmark:header:start
#
#   project      : LintDiffLine
#   file         : exit_codes.py
#   file_relpath : src/lintdiffline/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Exit codes for the LintDiffLine CLI.

The values follow the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``LINT_ERRORS = 1`` mirrors the
exit status linters use when a run reports errors.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LintDiffLine CLI.

    Attributes:
        SUCCESS: The report contains no errors (warnings are allowed).
        LINT_ERRORS: The report contains at least one error.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The results input is not valid JSON. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The results file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: The results file could not be read. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    LINT_ERRORS = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
