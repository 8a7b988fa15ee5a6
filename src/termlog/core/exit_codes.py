# termlog:header:start
#
#   project      : TermLog
#   file         : exit_codes.py
#   file_relpath : src/termlog/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Exit codes for TermLog.

TermLog aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for TermLog.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        IO_ERROR: Writing to an output stream failed. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
