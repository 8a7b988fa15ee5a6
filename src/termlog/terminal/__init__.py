# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/terminal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Terminal capability detection and escape-sequence helpers."""

from __future__ import annotations

from termlog.terminal.ansi import AnsiTerminal, detect_color_support, get_terminal
from termlog.terminal.color import ColorMode, resolve_color_mode

__all__ = [
    "AnsiTerminal",
    "ColorMode",
    "detect_color_support",
    "get_terminal",
    "resolve_color_mode",
]
