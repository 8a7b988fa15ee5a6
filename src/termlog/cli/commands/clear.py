# termlog:header:start
#
#   project      : TermLog
#   file         : clear.py
#   file_relpath : src/termlog/cli/commands/clear.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog `clear` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termlog.cli.errors import translate_errors

if TYPE_CHECKING:
    from termlog.logger import Logger
    from termlog.terminal.ansi import AnsiTerminal


@click.command(
    name="clear",
    help="Clear the screen (prints blank lines on terminals without ANSI support).",
)
def clear_command() -> None:
    """Write the terminal's clear-screen sequence."""
    ctx = click.get_current_context()
    logger: Logger = ctx.obj["logger"]
    terminal: AnsiTerminal = ctx.obj["terminal"]

    with translate_errors():
        logger.print_status(terminal.clear_screen(), newline=False)
