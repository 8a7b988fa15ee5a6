# termlog:header:start
#
#   project      : TermLog
#   file         : demo.py
#   file_relpath : src/termlog/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""TermLog `demo` command.

Runs a few simulated steps through the selected logger so that every output
mode can be seen in action: a spinner per step on color terminals, plain status
lines otherwise, and per-message timings with ``-v``.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import click

from termlog.cli.errors import translate_errors
from termlog.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from termlog.logger import Logger
    from termlog.status import Status


class SimulatedStepError(RuntimeError):
    """Raised by a simulated step selected with ``--fail-at``."""


def run_step(index: int, *, delay: float, fail_at: int | None) -> None:
    """Pretend to work on step ``index`` for ``delay`` seconds."""
    time.sleep(delay)
    if fail_at == index:
        raise SimulatedStepError(f"step {index} failed on purpose")


@click.command(
    name="demo",
    help="Run simulated steps and show their progress.",
)
@click.option(
    "--steps",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Number of simulated steps.",
)
@click.option(
    "--delay",
    type=click.FloatRange(min=0.0),
    default=0.5,
    show_default=True,
    help="Seconds each step takes.",
)
@click.option(
    "--elapsed/--no-elapsed",
    default=True,
    show_default=True,
    help="Show the elapsed time when a step completes.",
)
@click.option(
    "--fail-at",
    type=click.IntRange(min=1),
    default=None,
    help="Make the given step fail, to show error output.",
)
def demo_command(*, steps: int, delay: float, elapsed: bool, fail_at: int | None) -> None:
    """Run ``steps`` simulated steps, each with its own progress display.

    Args:
        steps (int): Number of steps.
        delay (float): Duration of one step, in seconds.
        elapsed (bool): Whether stopping a step reports its duration.
        fail_at (int | None): Step that raises, if any.
    """
    ctx = click.get_current_context()
    logger: Logger = ctx.obj["logger"]

    with translate_errors():
        for index in range(1, steps + 1):
            logger.print_trace(f"starting step {index}/{steps}")
            status: Status = logger.start_progress(f"Running step {index} of {steps}")
            try:
                run_step(index, delay=delay, fail_at=fail_at)
                status.stop(show_elapsed_time=elapsed)
            except SimulatedStepError as exc:
                status.cancel()
                logger.print_error(f"Step {index} failed: {exc}", exc)
                logger.flush()
                ctx.exit(ExitCode.FAILURE)
            finally:
                # No-op after stop(); ends the spinner on any other exception.
                status.cancel()

        if not logger.quiet:
            logger.print_status(f"Completed {steps} step(s).", emphasis=True)
        logger.flush()
