# termlog:header:start
#
#   project      : TermLog
#   file         : main.py
#   file_relpath : src/termlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog command-line interface.

The CLI is a small consumer of the TermLog output layer. It shows how a command
selects its program-output logger once at startup:

- Group-level options are resolved once and placed into ``ctx.obj``
  (``terminal``, ``logger``, ``log_level``, ``color_enabled``).
- Subcommands fetch the logger from the context and never write to the
  standard streams directly.
- The logger is flushed when the context closes so deferred output is never lost.
"""

from __future__ import annotations

import click

from termlog.cli.commands.clear import clear_command
from termlog.cli.commands.demo import demo_command
from termlog.cli.commands.keys import keys_command
from termlog.cli.commands.version import version_command
from termlog.cli.errors import translate_errors
from termlog.cli.options import (
    Verbosity,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from termlog.config.logging import get_logger, resolve_env_log_level, setup_logging
from termlog.logger import Logger, create_logger
from termlog.terminal.ansi import AnsiTerminal, get_terminal
from termlog.terminal.color import ColorMode, resolve_color_mode

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (diagnostics, color, program-output logger) on the context.

    Values already present in ``ctx.obj`` (e.g. a ``terminal`` or ``logger``
    injected by tests) are kept.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    verbosity: Verbosity = resolve_verbosity(verbose, quiet)
    # Internal diagnostics: the environment wins over -v/-q.
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else verbosity.log_level
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)

    terminal: AnsiTerminal = ctx.obj.get("terminal") or get_terminal()
    ctx.obj["terminal"] = terminal
    terminal.supports_color = enable_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    program_logger: Logger = ctx.obj.get("logger") or create_logger(
        verbose=verbosity.timestamps, terminal=terminal
    )
    ctx.obj["logger"] = program_logger
    program_logger.quiet = verbosity.quiet
    logger.debug(
        "initialized %s (color=%s, quiet=%s)",
        type(program_logger).__name__,
        enable_color,
        program_logger.quiet,
    )

    def _flush_on_close() -> None:
        with translate_errors():
            program_logger.flush()

    ctx.call_on_close(_flush_on_close)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TermLog: console output layer demonstration CLI.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TermLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        program_logger: Logger = ctx.obj["logger"]
        with translate_errors():
            program_logger.print_status("Hint: use 'termlog demo' to see the progress display.")
            program_logger.print_status("")
            program_logger.print_status(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

cli.add_command(keys_command)

cli.add_command(clear_command)

if __name__ == "__main__":
    cli()
