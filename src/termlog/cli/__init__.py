# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Click-based command-line interface for TermLog."""

from __future__ import annotations
