# topmark:header:start
#
#   project      : LintDiffLine
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Pytest configuration and shared builders for the LintDiffLine test suite.

Report text may or may not carry ANSI styling depending on the terminal the
tests run in; assertions on text go through `plain()` so they hold either way.
"""

from __future__ import annotations

from typing import Any

import click
import pytest

from lintdiffline.config import logging
from lintdiffline.config.logging import LOG_LEVEL_ENV_VAR
from lintdiffline.results.model import DiagnosticMessage, FileResult, FormatMode, Severity


def plain(text: str) -> str:
    """Return `text` with ANSI styling removed."""
    return click.unstyle(text)


def msg(
    line: int = 1,
    column: int = 1,
    severity: Severity = Severity.WARNING,
    message: str = "Something is off.",
    rule_id: str | None = "some-rule",
    **kwargs: Any,
) -> DiagnosticMessage:
    """Return a `DiagnosticMessage` with test-friendly defaults.

    Args:
        line (int): Line number.
        column (int): Column number.
        severity (Severity): Message severity.
        message (str): Message text.
        rule_id (str | None): Rule identifier.
        **kwargs (Any): Other `DiagnosticMessage` fields (``fatal``, ``fixable``, ``new_line``).

    Returns:
        DiagnosticMessage: The message.
    """
    return DiagnosticMessage(
        line=line,
        column=column,
        severity=severity,
        message=message,
        rule_id=rule_id,
        **kwargs,
    )


def file_result(
    file_path: str,
    *messages: DiagnosticMessage,
    format_mode: FormatMode | None = None,
) -> FileResult:
    """Return a `FileResult` whose counts are derived from `messages`.

    Args:
        file_path (str): Path reported for the file.
        *messages (DiagnosticMessage): The file's messages.
        format_mode (FormatMode | None): Declared format mode.

    Returns:
        FileResult: The record, as a linter would report it.
    """
    derived: FileResult = FileResult(file_path=file_path).with_messages(messages)
    return FileResult(
        file_path=file_path,
        messages=derived.messages,
        error_count=derived.error_count,
        warning_count=derived.warning_count,
        fixable_error_count=derived.fixable_error_count,
        fixable_warning_count=derived.fixable_warning_count,
        format_mode=format_mode,
    )


@pytest.fixture(autouse=True)
def silence_env_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
