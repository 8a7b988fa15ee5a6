# termlog:header:start
#
#   project      : TermLog
#   file         : timer.py
#   file_relpath : src/termlog/utils/timer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Wall-clock stopwatch and cancellable repeating timer.

These two small primitives back the elapsed-time annotations of the verbose
logger and the spinner animation of the ANSI progress handle.
"""

from __future__ import annotations

import threading
from time import monotonic
from typing import TYPE_CHECKING

from termlog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from termlog.config.logging import TermlogLogger

logger: TermlogLogger = get_logger(__name__)


class Stopwatch:
    """Measure elapsed wall-clock time using a monotonic clock.

    The stopwatch starts on construction unless ``start=False`` is passed.
    Calling `stop()` freezes the reading; `start()` resumes it.
    """

    def __init__(self, *, start: bool = True) -> None:
        self._accumulated: float = 0.0
        self._started_at: float | None = None
        if start:
            self.start()

    @property
    def is_running(self) -> bool:
        """Whether the stopwatch is currently accumulating time."""
        return self._started_at is not None

    def start(self) -> None:
        """Start (or resume) measuring."""
        if self._started_at is None:
            self._started_at = monotonic()

    def stop(self) -> None:
        """Stop measuring; later readings return the frozen value."""
        if self._started_at is not None:
            self._accumulated += monotonic() - self._started_at
            self._started_at = None

    @property
    def elapsed(self) -> float:
        """Elapsed time in seconds."""
        running: float = 0.0
        if self._started_at is not None:
            running = monotonic() - self._started_at
        return self._accumulated + running

    @property
    def elapsed_milliseconds(self) -> int:
        """Elapsed time in whole milliseconds (truncated)."""
        return int(self.elapsed * 1000)


class RepeatingTimer:
    """Invoke a callback every ``interval`` seconds on a daemon thread.

    The timer starts on construction. `cancel()` is idempotent and may be
    called from any thread, including from within the callback; once it
    returns, the callback is not scheduled again.

    Args:
        interval (float): Delay between callbacks, in seconds.
        callback (Callable[[RepeatingTimer], None]): Function receiving the timer.
        name (str | None): Optional thread name, shown in diagnostics.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[RepeatingTimer], None],
        *,
        name: str | None = None,
    ) -> None:
        self.interval = interval
        self.callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name or "termlog-timer", daemon=True)
        self._thread.start()
        logger.trace("timer %s started (interval=%.3fs)", self._thread.name, interval)

    @property
    def is_active(self) -> bool:
        """Whether the timer will fire again."""
        return not self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop scheduling callbacks (no-op when already cancelled)."""
        if self._cancelled.is_set():
            return
        self._cancelled.set()
        logger.trace("timer %s cancelled", self._thread.name)

    def join(self, timeout: float | None = None) -> None:
        """Wait for the timer thread to exit; call after `cancel()`."""
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._cancelled.wait(self.interval):
            self.callback(self)
