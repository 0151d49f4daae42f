# topmark:header:start
#
#   project      : editml-clean
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""CLI test helpers for running editml-clean in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click command, so relative input and output paths resolve
against the temporary test directory.

Click's `CliRunner` keeps stdout and stderr apart (``result.stdout`` and
``result.stderr``), which lets the tests check that the payload and the
diagnostics never mix.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from editml_clean.cli.main import cli
from editml_clean.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector,
            e.g. ``["-o", "out.txt", "in.editml"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the command.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g., ``--help``, ``--version`` or stdin-only runs).

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1) and wrote nothing to stdout."""
    assert result.exit_code == ExitCode.FAILURE, result.output
    assert result.stdout == ""


def assert_STRICT_WARNINGS(result: Result) -> None:
    """Assert that the command exited with STRICT_WARNINGS (code 2) without a Click error."""
    # Click usage errors are remapped to 64, but keep the check explicit.
    assert result.exit_code == ExitCode.STRICT_WARNINGS, result.output
    assert "Usage:" not in result.stderr
    assert result.stdout == ""


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
