# topmark:header:start
#
#   project      : LintDiffLine
#   file         : model.py
#   file_relpath : src/lintdiffline/results/model.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Immutable diagnostic records consumed by the report formatter.

Sections:
    * Severity: ordered message severity (info < warning < error).
    * FormatMode: whether results were pre-filtered to new lines by the caller.
    * DiagnosticMessage: one finding within a file.
    * FileResult: one file's findings plus the linter's per-file counts.

All optional fields carry explicit defaults so that rendering code never has to
guess about missing values; the loaders resolve raw linter output into these
records.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Severity(IntEnum):
    """Message severity, numerically compatible with ESLint's 0/1/2 scale."""

    INFO = 0
    WARNING = 1
    ERROR = 2


class FormatMode(str, Enum):
    """How the caller prepared the results.

    Attributes:
        LINE_ONLY: Results already contain only diagnostics on new lines.
        FULL_FILE: Results contain whole-file diagnostics; messages on new lines
            carry the `new_line` flag and are split out locally.
    """

    LINE_ONLY = "lineOnly"
    FULL_FILE = "fullFile"


@dataclass(frozen=True)
class DiagnosticMessage:
    """One finding within a file.

    Attributes:
        line: 1-based line number, or 0 when unknown.
        column: 1-based column number, or 0 when unknown.
        severity: Reported severity.
        message: Free-text description.
        rule_id: Identifier of the rule that fired, if any.
        fatal: True for parse failures and other fatal problems.
        fixable: True when the linter offers an automatic fix.
        new_line: True when the message sits on a newly introduced line.
    """

    line: int = 0
    column: int = 0
    severity: Severity = Severity.WARNING
    message: str = ""
    rule_id: str | None = None
    fatal: bool = False
    fixable: bool = False
    new_line: bool = False

    @property
    def is_error(self) -> bool:
        """Return True if this message is reported as an error."""
        return self.fatal or self.severity == Severity.ERROR


@dataclass(frozen=True)
class FileResult:
    """One file's findings.

    The four counts are those reported by the linter for this file and are
    summed as-is by the renderer; they are not derived from `messages` unless
    the record was produced by `with_messages`.
    """

    file_path: str
    messages: tuple[DiagnosticMessage, ...] = field(default_factory=lambda: ())
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    format_mode: FormatMode | None = None

    def with_messages(self, messages: Iterable[DiagnosticMessage]) -> FileResult:
        """Return a copy restricted to `messages` with counts recomputed from them.

        Args:
            messages: Subset of this file's messages, in the order to keep.

        Returns:
            FileResult: Same path and format mode, new messages and counts.
        """
        kept: tuple[DiagnosticMessage, ...] = tuple(messages)
        errors: list[DiagnosticMessage] = [m for m in kept if m.is_error]
        warnings: list[DiagnosticMessage] = [m for m in kept if not m.is_error]
        return replace(
            self,
            messages=kept,
            error_count=len(errors),
            warning_count=len(warnings),
            fixable_error_count=sum(1 for m in errors if m.fixable),
            fixable_warning_count=sum(1 for m in warnings if m.fixable),
        )
