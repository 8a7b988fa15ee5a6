# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog package.

TermLog is the console-output layer of a command-line tool. It provides a
uniform program-output `Logger` with interchangeable strategies (immediate,
in-memory, and timestamped verbose output), a terminal-capability helper that
detects ANSI support, and an animated progress display.
"""

from __future__ import annotations

from termlog.logger import (
    BufferLogger,
    Logger,
    LogMessage,
    LogType,
    StdoutLogger,
    VerboseLogger,
    create_logger,
)
from termlog.status import AnsiStatus, Status
from termlog.terminal.ansi import AnsiTerminal, get_terminal

__all__ = [
    "AnsiStatus",
    "AnsiTerminal",
    "BufferLogger",
    "LogMessage",
    "LogType",
    "Logger",
    "Status",
    "StdoutLogger",
    "VerboseLogger",
    "create_logger",
    "get_terminal",
]
