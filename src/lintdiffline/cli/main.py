# topmark:header:start
#
#   project      : LintDiffLine
#   file         : main.py
#   file_relpath : src/lintdiffline/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""LintDiffLine command-line runner.

Reads linter results in ESLint JSON form from a file or STDIN, prints the
new-vs-existing report, and exits with `ExitCode.LINT_ERRORS` when the report
contains errors.

Examples:
    ```bash
    eslint -f json src/ | lint-diff-annotate | lintdiffline
    lintdiffline --merge-policy first-nonzero results.json
    ```
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from yachalk import chalk

from lintdiffline.cli.console import ClickConsole
from lintdiffline.cli.errors import (
    LintDiffLineDataError,
    LintDiffLineFileNotFoundError,
    LintDiffLineIOError,
)
from lintdiffline.cli.exit_codes import ExitCode
from lintdiffline.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    merge_policy_option,
    resolve_color_mode,
    resolve_verbosity,
)
from lintdiffline.config.logging import get_logger, resolve_env_log_level, setup_logging
from lintdiffline.report.formatter import format_report
from lintdiffline.report.partition import MergePolicy, get_output
from lintdiffline.results.loaders import ResultsDecodeError, parse_results_json

if TYPE_CHECKING:
    from lintdiffline.config.logging import LintDiffLineLogger
    from lintdiffline.rendering.renderer import AggregateReport
    from lintdiffline.results.model import FileResult

logger: LintDiffLineLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> ClickConsole:
    """Configure logging and color, and store the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ClickConsole: The console used for program output.
    """
    ctx.obj = ctx.obj or {}

    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    # yachalk picks a color mode at import; the CLI choice replaces it.
    if enable_color:
        chalk.enable_full_colors()
    else:
        chalk.disable_all_ansi()

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    return console


def read_results_text(input_path: str) -> str:
    """Return the raw results text from `input_path` or STDIN.

    Args:
        input_path: Path to a results file, or ``-`` for STDIN.

    Returns:
        str: The text read.

    Raises:
        LintDiffLineFileNotFoundError: If the file does not exist.
        LintDiffLineDataError: If the file is not valid UTF-8.
        LintDiffLineIOError: If the file cannot be read.
    """
    if input_path == STDIN_SENTINEL:
        return sys.stdin.read()

    path = Path(input_path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LintDiffLineFileNotFoundError(f"Results file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise LintDiffLineDataError(f"Results file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise LintDiffLineIOError(f"Cannot read results file {path}: {e}") from e


@click.command(
    name="lintdiffline",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Print a lint report that separates diagnostics on new lines from existing ones.",
)
@click.argument("input_path", metavar="[RESULTS]", default=STDIN_SENTINEL, required=False)
@merge_policy_option
@common_verbose_options
@common_color_options
@click.version_option(package_name="lintdiffline", prog_name="LintDiffLine")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: str,
    merge_policy: MergePolicy,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the LintDiffLine CLI."""
    console: ClickConsole = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    text: str = read_results_text(input_path)
    try:
        results: list[FileResult] = parse_results_json(text)
    except ResultsDecodeError as e:
        raise LintDiffLineDataError(str(e)) from e

    logger.info("Formatting %d file result(s) from %s", len(results), input_path)
    if not results:
        ctx.exit(ExitCode.SUCCESS)

    report: AggregateReport = get_output(results, merge_policy=merge_policy)
    output: str = format_report(report)
    if output:
        console.print(output, nl=False)

    ctx.exit(ExitCode.LINT_ERRORS if report.error_count > 0 else ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
