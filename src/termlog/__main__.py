# termlog:header:start
#
#   project      : TermLog
#   file         : __main__.py
#   file_relpath : src/termlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Module entry point for running TermLog via ``python -m termlog``.

It delegates directly to :func:`termlog.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how TermLog is launched.

Examples:
    Run the demo using the module interface::

        python -m termlog -v demo --steps 2
"""

from __future__ import annotations

from termlog.cli.main import cli

if __name__ == "__main__":
    cli()
