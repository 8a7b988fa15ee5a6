# termlog:header:start
#
#   project      : TermLog
#   file         : __init__.py
#   file_relpath : src/termlog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Subcommands of the TermLog CLI."""

from __future__ import annotations
