# termlog:header:start
#
#   project      : TermLog
#   file         : version.py
#   file_relpath : src/termlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog `version` command.

Prints the current TermLog version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termlog.cli.errors import translate_errors
from termlog.constants import TERMLOG_VERSION

if TYPE_CHECKING:
    from termlog.logger import Logger


@click.command(
    name="version",
    help="Show the current version of TermLog.",
)
def version_command() -> None:
    """Show the current version of TermLog."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    logger: Logger = ctx.obj["logger"]

    with translate_errors():
        logger.print_status(TERMLOG_VERSION)
