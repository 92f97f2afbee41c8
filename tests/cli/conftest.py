# topmark:header:start
#
#   project      : LintDiffLine
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LintDiffLine contributors
#
# topmark:header:end

"""CLI test helpers for invoking LintDiffLine through Click's test runner."""

from __future__ import annotations

import json
import logging
from typing import IO, TYPE_CHECKING, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result
from yachalk import chalk

from lintdiffline.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `argv` and optional STDIN.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--no-color", "-"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_results(path: Path, data: object) -> Path:
    """Write `data` as JSON to `path` and return the path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers and level replaced by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def restore_chalk_mode() -> Iterator[None]:
    """Restore the yachalk color mode that the CLI overrides from ``--color``."""
    mode = chalk.get_color_mode()
    yield
    chalk.set_color_mode(mode)
