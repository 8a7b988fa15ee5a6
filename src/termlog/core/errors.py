# termlog:header:start
#
#   project      : TermLog
#   file         : errors.py
#   file_relpath : src/termlog/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Exceptions raised by TermLog.

TermLog has no error taxonomy for the messages it prints: it is the destination
for errors raised elsewhere. The exceptions below only cover failures of TermLog
itself, chiefly an output stream that can no longer be written to.
"""

from __future__ import annotations

from termlog.core.exit_codes import ExitCode


class TermlogError(Exception):
    """Base class for all TermLog errors.

    Attributes:
        exit_code (ExitCode): Process exit code the CLI uses for this error.
    """

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OutputStreamError(TermlogError):
    """Writing to stdout/stderr failed; the process cannot report anything further."""

    exit_code = ExitCode.IO_ERROR
