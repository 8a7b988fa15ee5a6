# termlog:header:start
#
#   project      : TermLog
#   file         : status.py
#   file_relpath : src/termlog/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Progress handles returned by `Logger.start_progress()`.

A [`Status`][termlog.status.Status] represents one in-flight, indeterminate
progress indication. The base class does nothing so that non-animated logger
modes can still hand out a valid handle; [`AnsiStatus`][termlog.status.AnsiStatus]
draws a spinner next to the message until it is stopped or canceled.
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, ClassVar, Final, TextIO

from termlog.config.logging import get_logger
from termlog.core.errors import OutputStreamError
from termlog.terminal.ansi import get_terminal
from termlog.utils.streams import write_text
from termlog.utils.timer import RepeatingTimer, Stopwatch

if TYPE_CHECKING:
    from termlog.config.logging import TermlogLogger
    from termlog.terminal.ansi import AnsiTerminal

logger: TermlogLogger = get_logger(__name__)

#: Column width the progress message is padded to.
MESSAGE_WIDTH: Final[int] = 51

#: Spacer between the padded message and the spinner glyph.
SPINNER_GAP: Final[str] = " " * 5

#: Seconds between two spinner frames.
SPINNER_INTERVAL: Final[float] = 0.1


class Status:
    """A progress handle that renders nothing.

    Both termination methods are idempotent.
    """

    def stop(self, *, show_elapsed_time: bool = False) -> None:
        """End the progress indication normally."""

    def cancel(self) -> None:
        """End the progress indication because other output preempts it."""


class AnsiStatus(Status):
    """Spinner-animated progress handle for color-capable terminals.

    On construction the message is written padded to `MESSAGE_WIDTH` columns,
    followed by the first glyph of `SPINNER`; every `SPINNER_INTERVAL` seconds
    the glyph is erased with a backspace and the next one drawn.

    If drawing a frame fails, the spinner stops and the `OutputStreamError` is
    raised by the next `stop()` or `cancel()`, once.

    Args:
        message (str): Text shown in front of the spinner.
        out (TextIO | None): Stream to draw on. Defaults to `sys.stdout`.
        terminal (AnsiTerminal | None): Shared terminal state. Defaults to
            [`get_terminal()`][termlog.terminal.ansi.get_terminal].
        interval (float | None): Seconds between frames. Defaults to `SPINNER_INTERVAL`.
    """

    SPINNER: ClassVar[tuple[str, ...]] = ("-", "\\", "|", "/", "-", "\\", "|", "/")

    def __init__(
        self,
        message: str,
        *,
        out: TextIO | None = None,
        terminal: AnsiTerminal | None = None,
        interval: float | None = None,
    ) -> None:
        self.message = message
        self.out: TextIO = out or sys.stdout
        self.terminal: AnsiTerminal = terminal or get_terminal()
        self.index: int = 1
        self.live: bool = True
        # Serializes frame writes against the final stop/cancel render.
        self._lock = threading.Lock()
        self._failure: OutputStreamError | None = None

        self.stopwatch = Stopwatch()
        self._write(f"{message.ljust(MESSAGE_WIDTH)}{SPINNER_GAP}{self.SPINNER[0]}")
        self.timer = RepeatingTimer(
            SPINNER_INTERVAL if interval is None else interval,
            self._callback,
            name="termlog-spinner",
        )
        logger.debug("progress started: %r", message)

    def _write(self, text: str, *, nl: bool = False) -> None:
        write_text(text, file=self.out, nl=nl, color=self.terminal.supports_color)

    def _callback(self, timer: RepeatingTimer) -> None:
        with self._lock:
            if not self.live:
                return
            try:
                self._write(f"\b{self.SPINNER[self.index]}")
            except OutputStreamError as exc:
                # Raised again by the next stop()/cancel() on the caller's thread.
                self._failure = exc
                self.live = False
                self.stopwatch.stop()
                timer.cancel()
                logger.debug("progress aborted: %s", exc.message)
                return
            self.index = (self.index + 1) % len(self.SPINNER)

    def _finish(self, final_frame: str) -> bool:
        with self._lock:
            failure, self._failure = self._failure, None
            if failure is None:
                if not self.live:
                    return False
                self.live = False
                self.timer.cancel()
                self.stopwatch.stop()
                self._write(final_frame, nl=True)
        self.timer.join()
        if failure is not None:
            raise failure
        return True

    def stop(self, *, show_elapsed_time: bool = False) -> None:
        """Stop the spinner, optionally replacing it with the elapsed seconds.

        Args:
            show_elapsed_time (bool): If True, print e.g. ``1.3s`` over the
                spinner column; otherwise just erase the glyph.
        """
        if show_elapsed_time:
            seconds: float = self.stopwatch.elapsed_milliseconds / 1000.0
            final_frame = f"\b\b\b\b{seconds:.1f}s"
        else:
            final_frame = "\b "
        if self._finish(final_frame):
            logger.debug("progress stopped: %r", self.message)

    def cancel(self) -> None:
        """Erase the spinner glyph and end the line without any summary."""
        if self._finish("\b "):
            logger.debug("progress canceled: %r", self.message)
