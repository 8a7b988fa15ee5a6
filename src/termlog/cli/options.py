# termlog:header:start
#
#   project      : TermLog
#   file         : options.py
#   file_relpath : src/termlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Shared group options for the TermLog CLI.

The ``-v``/``-q`` counters drive two things at once: which program-output
logger a command uses, and how chatty TermLog's own diagnostics are.
`resolve_verbosity()` turns the raw counts into a
[`Verbosity`][termlog.cli.options.Verbosity] so that the group callback does
not repeat that mapping.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, ParamSpec, TypeVar

import click

from termlog.cli.cli_types import EnumChoiceParam
from termlog.cli.errors import TermlogUsageError
from termlog.config.logging import TRACE_LEVEL
from termlog.terminal.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

#: Diagnostics level per number of ``-v`` flags (index 0: no flag).
VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)

#: Diagnostics level when ``-q`` is given.
QUIET_LEVEL: int = logging.ERROR


class Verbosity(NamedTuple):
    """Resolved ``-v``/``-q`` state.

    Attributes:
        log_level (int): Level for TermLog's internal diagnostics.
        timestamps (bool): Whether to use the timestamped verbose logger.
        quiet (bool): Whether commands should skip non-essential output.
    """

    log_level: int
    timestamps: bool
    quiet: bool


def resolve_verbosity(verbose_count: int, quiet_count: int) -> Verbosity:
    """Map the ``-v`` and ``-q`` counts onto a `Verbosity`.

    Any ``-v`` selects timestamped output; ``-v``, ``-vv`` and ``-vvv`` (or more)
    raise diagnostics to INFO, DEBUG and TRACE. Any ``-q`` sets ERROR. With
    neither, diagnostics stay at WARNING.

    Raises:
        TermlogUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise TermlogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return Verbosity(log_level=QUIET_LEVEL, timestamps=False, quiet=True)
    level: int = VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]
    return Verbosity(log_level=level, timestamps=verbose_count > 0, quiet=False)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Timestamp every message. Repeat (-vv, -vvv) for internal diagnostics.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and the ``--no-color`` shorthand."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output (default: auto).",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (same as --color never).",
    )(f)
    return f
