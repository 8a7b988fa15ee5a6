# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Core, UI-agnostic primitives shared across TermLog.

The ``termlog.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (loggers, terminal helpers, CLI, tests).

Included modules:

- ``exit_codes``
  Centralized exit codes for the CLI and runtime, aligned with BSD-style
  ``sysexits`` where practical.

- ``errors``
  The exception hierarchy raised by TermLog itself. The CLI layer translates
  these into Click exceptions carrying the matching exit code.
"""

from __future__ import annotations
