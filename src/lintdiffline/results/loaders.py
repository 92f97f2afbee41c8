# topmark:header:start
#
#   project      : LintDiffLine
#   file         : loaders.py
#   file_relpath : src/lintdiffline/results/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Convert ESLint-style JSON results into `lintdiffline.results.model` records.

The expected shape is the one produced by ESLint's ``json`` formatter, extended
with two keys set by the diff-aware runner:

- ``version`` on a file record (``"lineOnly"`` or ``"fullFile"``);
- ``newLineError`` on a message (true when the message is on a new line).

Missing or malformed fields never raise here: numbers default to 0, text to
the empty string, flags to False. Records that cannot be interpreted at all are
skipped and logged.
"""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any, cast

from lintdiffline.config.logging import get_logger
from lintdiffline.results.model import DiagnosticMessage, FileResult, FormatMode, Severity

if TYPE_CHECKING:
    from lintdiffline.config.logging import LintDiffLineLogger

logger: LintDiffLineLogger = get_logger(__name__)


class ResultsDecodeError(ValueError):
    """Raised when results text is not valid JSON."""


def _as_int(value: object) -> int:
    """Return `value` as a non-negative int, or 0 if it is not a usable number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(int(value), 0)


def _as_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _as_severity(value: object) -> Severity:
    if isinstance(value, bool) or not isinstance(value, int):
        return Severity.WARNING
    try:
        return Severity(value)
    except ValueError:
        logger.debug("Unknown severity %r, treating as warning", value)
        return Severity.WARNING


def _as_format_mode(value: object) -> FormatMode | None:
    if value is None:
        return None
    try:
        return FormatMode(value)
    except ValueError:
        logger.debug("Unknown format version %r, treating as fullFile", value)
        return None


def load_message(raw: dict[str, Any]) -> DiagnosticMessage:
    """Build a `DiagnosticMessage` from one raw message object.

    Args:
        raw: Message object as emitted by the linter.

    Returns:
        DiagnosticMessage: The message with defaults applied.
    """
    rule_id: object = raw.get("ruleId")
    return DiagnosticMessage(
        line=_as_int(raw.get("line")),
        column=_as_int(raw.get("column")),
        severity=_as_severity(raw.get("severity")),
        message=_as_str(raw.get("message")),
        rule_id=rule_id if isinstance(rule_id, str) else None,
        fatal=raw.get("fatal") is True,
        fixable=raw.get("fix") is not None,
        new_line=raw.get("newLineError") is True,
    )


def load_file_result(raw: dict[str, Any]) -> FileResult:
    """Build a `FileResult` from one raw file record.

    Args:
        raw: File record as emitted by the linter.

    Returns:
        FileResult: The record with defaults applied. Non-object entries in
        ``messages`` are dropped.
    """
    file_path: str = _as_str(raw.get("filePath"))
    raw_messages: object = raw.get("messages")
    messages: list[DiagnosticMessage] = []
    if isinstance(raw_messages, list):
        for item in cast("list[object]", raw_messages):
            if isinstance(item, dict):
                messages.append(load_message(cast("dict[str, Any]", item)))
            else:
                logger.warning("Skipping malformed message in %s: %r", file_path, item)

    return FileResult(
        file_path=file_path,
        messages=tuple(messages),
        error_count=_as_int(raw.get("errorCount")),
        warning_count=_as_int(raw.get("warningCount")),
        fixable_error_count=_as_int(raw.get("fixableErrorCount")),
        fixable_warning_count=_as_int(raw.get("fixableWarningCount")),
        format_mode=_as_format_mode(raw.get("version")),
    )


def load_results(data: object) -> list[FileResult]:
    """Build file results from decoded JSON data.

    Args:
        data: Decoded JSON; expected to be a list of file records.

    Returns:
        list[FileResult]: One record per well-formed file entry, in input order.
        Returns an empty list when `data` is not a list.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        logger.warning("Expected a list of file results, got %s", type(data).__name__)
        return []

    results: list[FileResult] = []
    for item in cast("list[object]", data):
        if not isinstance(item, dict):
            logger.warning("Skipping malformed file result: %r", item)
            continue
        results.append(load_file_result(cast("dict[str, Any]", item)))
    logger.debug("Loaded %d file result(s)", len(results))
    return results


def parse_results_json(text: str) -> list[FileResult]:
    """Decode JSON text and build file results from it.

    Args:
        text: JSON text as written by the linter.

    Returns:
        list[FileResult]: The loaded results.

    Raises:
        ResultsDecodeError: If `text` is not valid JSON.
    """
    if not text.strip():
        return []
    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResultsDecodeError(f"Invalid results JSON: {e}") from e
    return load_results(data)
