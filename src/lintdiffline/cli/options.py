# topmark:header:start
#
#   project      : LintDiffLine
#   file         : options.py
#   file_relpath : src/lintdiffline/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""Reusable CLI options (verbosity, color, count merging) and their resolution."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from lintdiffline.cli.cli_types import EnumChoiceParam
from lintdiffline.cli.errors import LintDiffLineUsageError
from lintdiffline.config.logging import TRACE_LEVEL
from lintdiffline.report.partition import MergePolicy

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for
        ``-v``, ERROR for ``-q`` and CRITICAL for ``-qq``. Default is WARNING.

    Raises:
        LintDiffLineUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LintDiffLineUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 2:
        return logging.CRITICAL
    if quiet_count == 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Decrease log verbosity. Repeat for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags first, then the FORCE_COLOR
        and NO_COLOR environment variables, and finally enables color only
        when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def merge_policy_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--merge-policy`` option to a command."""
    return click.option(
        "--merge-policy",
        "merge_policy",
        type=EnumChoiceParam(MergePolicy),
        default=MergePolicy.SUM.value,
        show_default=True,
        help=(
            "How new-line and existing-line counts combine in the summary: "
            "'sum' adds them, 'first-nonzero' prefers the new-line count."
        ),
    )(f)
