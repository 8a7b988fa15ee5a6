# termlog:header:start
#
#   project      : TermLog
#   file         : errors.py
#   file_relpath : src/termlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Exceptions for the TermLog CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors ([`TermlogError`][termlog.core.errors.TermlogError])
    are translated by [`translate_errors`][termlog.cli.errors.translate_errors].

Styling:
    Exceptions prefer the program-output logger stored in the Click context (see
    `show()`); if none is present they fall back to Click's default display.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from termlog.core.errors import OutputStreamError, TermlogError
from termlog.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from termlog.logger import Logger


class TermlogCliError(click.ClickException):
    """Base class for all TermLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the context logger if available.

        Falls back to Click's default error display when no logger is present.
        """
        ctx = click.get_current_context(silent=True)
        logger: Logger | None = None
        if ctx is not None and isinstance(ctx.obj, dict):
            logger = ctx.obj.get("logger")
        if logger is None:
            super().show(file)
            return
        logger.print_error(logger.terminal.write_bold(f"Error: {self.format_message()}"))
        logger.flush()


class TermlogUsageError(TermlogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TermlogOutputError(TermlogCliError):
    """Error raised when program output can no longer be written."""

    exit_code = ExitCode.IO_ERROR

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - stream is broken
        """Report through Click's default display; the logger's streams are unusable."""
        click.ClickException.show(self, file)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise core TermLog errors as CLI errors carrying the same exit code.

    Raises:
        TermlogOutputError: If an output stream failed.
        TermlogCliError: For any other `TermlogError`.
    """
    try:
        yield
    except OutputStreamError as exc:
        raise TermlogOutputError(exc.message) from exc
    except TermlogError as exc:
        err = TermlogCliError(exc.message)
        err.exit_code = exc.exit_code
        raise err from exc
