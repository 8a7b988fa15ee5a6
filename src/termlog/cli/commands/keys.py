# termlog:header:start
#
#   project      : TermLog
#   file         : keys.py
#   file_relpath : src/termlog/cli/commands/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog `keys` command.

Echoes the keys read from the terminal in single-character mode, naming the
function keys TermLog recognizes (F1, F5, F10). Stops on ``q`` or end of input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termlog.cli.errors import translate_errors

if TYPE_CHECKING:
    from termlog.logger import Logger
    from termlog.terminal.ansi import AnsiTerminal

#: Key that ends the session.
QUIT_KEY = "q"


def describe_key(key: str, terminal: AnsiTerminal) -> str:
    """Return a printable name for ``key``: the function-key name or its repr."""
    return terminal.KEY_NAMES.get(key, repr(key))


@click.command(
    name="keys",
    help="Echo key presses (press 'q' to quit).",
)
def keys_command() -> None:
    """Read keystrokes one at a time and print their names."""
    ctx = click.get_current_context()
    logger: Logger = ctx.obj["logger"]
    terminal: AnsiTerminal = ctx.obj["terminal"]

    with translate_errors():
        if not logger.quiet:
            logger.print_status(f"Press keys to see their names; '{QUIT_KEY}' quits.")
        terminal.single_char_mode = True
        try:
            for key in terminal.on_key_input():
                if key == QUIT_KEY:
                    break
                logger.print_status(describe_key(key, terminal))
        finally:
            terminal.single_char_mode = False
        logger.flush()
