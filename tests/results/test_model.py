# topmark:header:start
#
#   project      : LintDiffLine
#   file         : test_model.py
#   file_relpath : tests/results/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Unit tests for the diagnostic record types."""

from __future__ import annotations

from lintdiffline.results.model import DiagnosticMessage, FileResult, FormatMode, Severity
from tests.conftest import msg


def test_message_defaults() -> None:
    """A bare message sits at 0:0 as a warning without rule or flags."""
    m = DiagnosticMessage()
    assert (m.line, m.column) == (0, 0)
    assert m.severity == Severity.WARNING
    assert m.rule_id is None
    assert not (m.fatal or m.fixable or m.new_line)


def test_is_error_for_severity_two_or_fatal() -> None:
    """Severity 2 and the fatal flag both mean error."""
    assert msg(severity=Severity.ERROR).is_error
    assert msg(severity=Severity.WARNING, fatal=True).is_error
    assert not msg(severity=Severity.WARNING).is_error
    assert not msg(severity=Severity.INFO).is_error


def test_severity_ordering() -> None:
    """Severities order info < warning < error."""
    assert Severity.INFO < Severity.WARNING < Severity.ERROR


def test_with_messages_recomputes_counts() -> None:
    """Derived results keep path and mode, with counts taken from their own messages."""
    original = FileResult(
        file_path="src/a.js",
        messages=(
            msg(severity=Severity.ERROR, fixable=True),
            msg(severity=Severity.WARNING),
            msg(severity=Severity.WARNING, fixable=True),
        ),
        error_count=7,
        warning_count=7,
        fixable_error_count=7,
        fixable_warning_count=7,
        format_mode=FormatMode.FULL_FILE,
    )

    derived = original.with_messages(original.messages[1:])

    assert derived.file_path == "src/a.js"
    assert derived.format_mode == FormatMode.FULL_FILE
    assert derived.messages == original.messages[1:]
    assert derived.error_count == 0
    assert derived.warning_count == 2
    assert derived.fixable_error_count == 0
    assert derived.fixable_warning_count == 1


def test_with_messages_empty() -> None:
    """Restricting to no messages zeroes every count."""
    original = FileResult(file_path="a.js", messages=(msg(),), warning_count=1)
    derived = original.with_messages([])
    assert derived.messages == ()
    assert derived.error_count == derived.warning_count == 0
