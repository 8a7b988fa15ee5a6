# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Runtime configuration helpers for TermLog (diagnostics logging)."""

from __future__ import annotations
