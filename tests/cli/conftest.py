# termlog:header:start
#
#   project      : TermLog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""CLI test helpers for running TermLog through Click's test runner.

`run_cli()` invokes the Click group in-process. Tests may inject a ``logger``
(typically a [`BufferLogger`][termlog.logger.BufferLogger]) and a ``terminal``
through the Click context object; `init_common_state()` keeps injected values
instead of building its own.
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from termlog.cli.main import cli
from termlog.core.exit_codes import ExitCode
from termlog.logger import BufferLogger
from termlog.terminal.ansi import AnsiTerminal

if TYPE_CHECKING:
    from termlog.logger import Logger


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    logger: Logger | None = None,
    terminal: AnsiTerminal | None = None,
) -> Result:
    """Invoke the CLI with optional logger and terminal overrides.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["demo", "--delay", "0"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for the command.
        logger (Logger | None): Program-output logger to use instead of the one
            selected from ``-v``.
        terminal (AnsiTerminal | None): Terminal to use instead of a fresh one.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    obj: dict[str, Any] = {}
    if logger is not None:
        obj["logger"] = logger
    if terminal is not None:
        obj["terminal"] = terminal
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj=obj)


def buffered(stdin: str = "") -> tuple[BufferLogger, AnsiTerminal]:
    """Return a fresh BufferLogger and the plain terminal it shares with the CLI.

    Args:
        stdin (str): Text the terminal reads as keyboard input.

    Returns:
        tuple[BufferLogger, AnsiTerminal]: The logger and its terminal.
    """
    terminal = AnsiTerminal(supports_color=False, stdin=io.StringIO(stdin))
    return BufferLogger(terminal=terminal), terminal


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command reported a failed step (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
