# topmark:header:start
#
#   project      : LintDiffLine
#   file         : errors.py
#   file_relpath : src/lintdiffline/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Exceptions for the LintDiffLine CLI.

Each error carries the exit code the CLI terminates with. They print through
the project console when one is present in the Click context, and fall back to
Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from lintdiffline.cli.exit_codes import ExitCode


class LintDiffLineError(click.ClickException):
    """Base class for all LintDiffLine CLI errors."""

    exit_code = ExitCode.IO_ERROR

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class LintDiffLineUsageError(LintDiffLineError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LintDiffLineDataError(LintDiffLineError):
    """Error for results input that is not valid JSON."""

    exit_code = ExitCode.DATA_ERROR


class LintDiffLineFileNotFoundError(LintDiffLineError):
    """Error when the results file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LintDiffLineIOError(LintDiffLineError):
    """Error for failures reading the results input."""

    exit_code = ExitCode.IO_ERROR
