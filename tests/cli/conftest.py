# topmark:header:start
#
#   project      : LintStack
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LintStack in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative target directories and
``--config`` paths resolve against the temporary test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from lintstack.cli.exit_codes import ExitCode
from lintstack.cli.main import cli
from lintstack.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["config", "dump"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on relative paths
    (e.g. ``--help`` or ``version``) or when all provided paths are absolute.
    """
    return CliRunner().invoke(cli, list(argv))


def toml_block(output: str) -> str:
    """Return the text between the TOML BEGIN/END markers of ``output``."""
    start: int = output.index(TOML_BLOCK_START) + len(TOML_BLOCK_START)
    end: int = output.index(TOML_BLOCK_END)
    return output[start:end]


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output
