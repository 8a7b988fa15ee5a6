# termlog:header:start
#
#   project      : TermLog
#   file         : logging.py
#   file_relpath : src/termlog/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Internal diagnostics logging with a TRACE level.

TermLog reports on its own machinery (terminal detection, spinner timers,
input mode switches) through the standard `logging` module, extended with:

- a ``TRACE`` level below ``DEBUG`` and a matching `TermlogLogger.trace()`;
- `ChalkFormatter`, which colors each record by severity;
- `setup_logging()`, which reads ``TERMLOG_LOG_LEVEL`` when no level is given
  and otherwise stays silent (``CRITICAL``).

Handlers write to stderr. User-facing program output goes through
[`termlog.logger.Logger`][] instead and is never routed through here.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `setup_logging()` when no level is given.
LOG_LEVEL_ENV_VAR: Final[str] = "TERMLOG_LOG_LEVEL"

#: Format used at INFO and above.
LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"

#: Format used below INFO; adds the emitting location.
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class TermlogLogger(logging.Logger):
    """Logger with a `trace()` method for the level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(TermlogLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    #: Lowest level of each band, highest first, with the chalk style applied to it.
    STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the style of its level band."""
        message: str = super().format(record)
        for threshold, style in self.STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TERMLOG_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``...) and
    plain integers. Unset, empty or unknown values resolve to None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName() maps unknown names to the string "Level <name>".
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a single colored handler.

    Args:
        level (int | None): Diagnostics level. When None, ``TERMLOG_LOG_LEVEL``
            is consulted, and the default is CRITICAL (silent).
        stream (TextIO | None): Destination of the handler. Defaults to the
            current `sys.stderr`.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> TermlogLogger:
    """Return the `TermlogLogger` registered under ``name``."""
    return cast("TermlogLogger", logging.getLogger(name))
