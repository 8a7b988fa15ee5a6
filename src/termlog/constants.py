# termlog:header:start
#
#   project      : TermLog
#   file         : constants.py
#   file_relpath : src/termlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TERMLOG_VERSION: str = get_version("termlog")
