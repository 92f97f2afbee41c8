# topmark:header:start
#
#   project      : LintDiffLine
#   file         : test_partition.py
#   file_relpath : tests/report/test_partition.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Tests for mode selection, new/existing partitioning and report merging."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lintdiffline.rendering.renderer import AggregateReport, build_result
from lintdiffline.rendering.styles import SummaryColor
from lintdiffline.report.partition import (
    MergePolicy,
    banner,
    determine_format_mode,
    get_output,
    merge_reports,
    partition_results,
)
from lintdiffline.results.model import FileResult, FormatMode, Severity
from tests.conftest import file_result, msg, plain

# --- determine_format_mode ----------------------------------------------------


def test_mode_defaults_to_full_file() -> None:
    """Without any marker the run is fullFile."""
    assert determine_format_mode([file_result("a.js", msg())]) == FormatMode.FULL_FILE
    assert determine_format_mode([]) == FormatMode.FULL_FILE


def test_any_line_only_marker_wins() -> None:
    """A single lineOnly marker switches the whole run."""
    results = [
        file_result("a.js", msg()),
        file_result("b.js", msg(), format_mode=FormatMode.FULL_FILE),
        file_result("c.js", format_mode=FormatMode.LINE_ONLY),
    ]
    assert determine_format_mode(results) == FormatMode.LINE_ONLY


# --- partition_results --------------------------------------------------------


def test_partition_splits_new_line_messages() -> None:
    """Only the flagged message goes to `new`; the others stay in `existing`."""
    messages = (
        msg(line=1, message="zero"),
        msg(line=2, message="one", new_line=True),
        msg(line=3, message="two"),
    )
    source = file_result("src/a.js", *messages)

    parts = partition_results([source])

    [new] = parts.new
    [existing] = parts.existing
    assert new.file_path == existing.file_path == "src/a.js"
    assert new.messages == (messages[1],)
    assert existing.messages == (messages[0], messages[2])


def test_partition_unflagged_file_goes_to_existing_unchanged() -> None:
    """Files without new-line messages keep their reported counts."""
    source = FileResult(file_path="a.js", messages=(msg(),), warning_count=5)
    parts = partition_results([source])
    assert parts.new == []
    assert parts.existing == [source]


def test_partition_all_new_leaves_empty_existing_copy() -> None:
    """A fully new file still yields a message-free existing copy."""
    source = file_result("a.js", msg(new_line=True))
    parts = partition_results([source])
    assert len(parts.new) == 1
    [existing] = parts.existing
    assert existing.messages == ()
    assert existing.warning_count == 0


def test_partition_counts_follow_messages() -> None:
    """Split halves count only the messages they hold."""
    source = file_result(
        "a.js",
        msg(severity=Severity.ERROR, new_line=True, fixable=True),
        msg(severity=Severity.ERROR),
        msg(severity=Severity.WARNING),
    )
    parts = partition_results([source])
    [new] = parts.new
    [existing] = parts.existing
    assert (new.error_count, new.warning_count, new.fixable_error_count) == (1, 0, 1)
    assert (existing.error_count, existing.warning_count, existing.fixable_error_count) == (
        1,
        1,
        0,
    )


# --- merge_reports ------------------------------------------------------------


def _report(
    errors: int, warnings: int, color: SummaryColor = SummaryColor.YELLOW
) -> AggregateReport:
    return AggregateReport(
        output="x",
        error_count=errors,
        warning_count=warnings,
        fixable_error_count=errors,
        fixable_warning_count=0,
        summary_color=color,
    )


def test_merge_sum() -> None:
    """The default policy adds both reports' counts."""
    merged = merge_reports(_report(2, 1), _report(3, 0))
    assert (merged.error_count, merged.warning_count) == (5, 1)
    assert merged.fixable_error_count == 5
    assert merged.output == ""


def test_merge_first_nonzero() -> None:
    """Per field, the new count wins when nonzero, else the existing count."""
    merged = merge_reports(_report(2, 0), _report(3, 4), MergePolicy.FIRST_NONZERO)
    assert merged.error_count == 2
    assert merged.warning_count == 4
    assert merged.fixable_warning_count == 0


def test_merge_color_is_red_if_either_is_red() -> None:
    """Color escalates across reports."""
    red, yellow = SummaryColor.RED, SummaryColor.YELLOW
    assert merge_reports(_report(0, 1, yellow), _report(1, 0, red)).summary_color == red
    assert merge_reports(_report(1, 0, red), _report(0, 1, yellow)).summary_color == red
    assert merge_reports(_report(0, 1), _report(0, 1)).summary_color == yellow


# --- get_output ---------------------------------------------------------------


def test_banner_layout() -> None:
    """Banners are a title between two rules."""
    assert banner("Title", "BODY") == (
        "\n --------------------------------- \n Title \n ---------------------------------BODY"
    )


def test_full_file_existing_only() -> None:
    """Existing diagnostics get their banner, followed by the no-new banner."""
    report = get_output(
        [file_result("a.js", msg(line=1, column=2, severity=Severity.ERROR, message="Bad."))]
    )
    text = plain(report.output)
    assert text.startswith("\n --------------------------------- \n Existing Lint Errors \n")
    assert text.endswith(
        " \n\n\n --------------------------------- \n No NEW Lint Errors! Nice. \n"
        " ---------------------------------\n\n"
    )
    assert "NEW Lint Errors \n" not in text.replace("No NEW Lint Errors", "")
    assert report.error_count == 1
    assert report.summary_color == SummaryColor.RED


def test_full_file_new_only() -> None:
    """A file whose only message is new shows the NEW banner and no existing banner."""
    report = get_output([file_result("a.js", msg(new_line=True))])
    text = plain(report.output)
    assert "Existing Lint Errors" not in text
    assert "No NEW Lint Errors" not in text
    assert text.startswith("\n --------------------------------- \n NEW Lint Errors \n")
    assert text.endswith("\n\n")
    assert report.warning_count == 1
    assert report.summary_color == SummaryColor.YELLOW


def test_full_file_existing_block_precedes_new_block() -> None:
    """Both banners appear, existing first."""
    report = get_output(
        [file_result("a.js", msg(message="old one"), msg(message="new one", new_line=True))]
    )
    text = plain(report.output)
    assert text.index("Existing Lint Errors") < text.index("old one")
    assert text.index("old one") < text.index("NEW Lint Errors") < text.index("new one")


def test_full_file_merge_policies_differ_for_mixed_files() -> None:
    """Summing counts both halves; first-nonzero keeps only the new half."""
    results = [
        file_result(
            "a.js",
            msg(severity=Severity.ERROR, new_line=True),
            msg(severity=Severity.ERROR),
        )
    ]
    assert get_output(results).error_count == 2
    assert get_output(results, merge_policy=MergePolicy.FIRST_NONZERO).error_count == 1


def test_line_only_has_no_banners() -> None:
    """lineOnly output is just the tables followed by two newlines."""
    results = [
        file_result("a.js", msg(severity=Severity.ERROR), format_mode=FormatMode.LINE_ONLY),
        file_result("b.js", msg()),
    ]
    report = get_output(results)
    text = plain(report.output)
    assert "Lint Errors" not in text
    assert text.startswith("\n\na.js\n")
    assert text.endswith("\n\n")
    assert "b.js" in text
    assert (report.error_count, report.warning_count) == (1, 1)


def test_line_only_ignores_new_line_flags() -> None:
    """In lineOnly mode every message is treated as new, flagged or not."""
    results = [
        file_result(
            "a.js",
            msg(message="flagged", new_line=True),
            msg(message="unflagged"),
            format_mode=FormatMode.LINE_ONLY,
        )
    ]
    text = plain(get_output(results).output)
    assert "flagged" in text
    assert "unflagged" in text


# --- count invariants ---------------------------------------------------------

_messages = st.builds(
    msg,
    line=st.integers(min_value=1, max_value=50),
    column=st.integers(min_value=1, max_value=20),
    severity=st.sampled_from([Severity.WARNING, Severity.ERROR]),
    new_line=st.booleans(),
    fixable=st.booleans(),
)
_runs = st.lists(st.lists(_messages, max_size=4), max_size=4).map(
    lambda files: [file_result(f"src/f{ix}.js", *ms) for ix, ms in enumerate(files)]
)


def _implied_counts(results: list[FileResult]) -> tuple[int, int, int, int]:
    messages = [m for r in results for m in r.messages]
    errors = [m for m in messages if m.is_error]
    warnings = [m for m in messages if not m.is_error]
    return (
        len(errors),
        len(warnings),
        sum(1 for m in errors if m.fixable),
        sum(1 for m in warnings if m.fixable),
    )


def _counts(report: AggregateReport) -> tuple[int, int, int, int]:
    return (
        report.error_count,
        report.warning_count,
        report.fixable_error_count,
        report.fixable_warning_count,
    )


@given(_runs)
def test_report_counts_match_rendered_messages(results: list[FileResult]) -> None:
    """New, existing and summed reports count exactly the messages they render."""
    parts = partition_results(results)
    new = build_result(parts.new)
    existing = build_result(parts.existing)

    assert _counts(new) == _implied_counts(parts.new)
    assert _counts(existing) == _implied_counts(parts.existing)
    assert _counts(get_output(results)) == _implied_counts(results)

    rendered = sum(len(r.messages) for r in parts.new + parts.existing)
    text = plain(new.output + existing.output)
    assert text.count("Something is off") == rendered


@given(_runs)
def test_partition_halves_reform_each_file(results: list[FileResult]) -> None:
    """Each file's new and existing halves hold its messages in their original order."""
    parts = partition_results(results)
    new_by_path = {r.file_path: r for r in parts.new}

    assert [r.file_path for r in parts.existing] == [r.file_path for r in results]
    for source, existing in zip(results, parts.existing, strict=True):
        flagged = tuple(m for m in source.messages if m.new_line)
        unflagged = tuple(m for m in source.messages if not m.new_line)
        assert existing.messages == unflagged
        if flagged:
            assert new_by_path[source.file_path].messages == flagged
        else:
            assert source.file_path not in new_by_path
