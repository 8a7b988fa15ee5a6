# termlog:header:start
#
#   project      : TermLog
#   file         : logger.py
#   file_relpath : src/termlog/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""User-facing program output for command-line tools.

A command selects one [`Logger`][termlog.logger.Logger] at startup and calls it
for everything it shows the user:

- [`StdoutLogger`][termlog.logger.StdoutLogger] writes immediately to stdout and
  stderr and animates progress with an
  [`AnsiStatus`][termlog.status.AnsiStatus] on color-capable terminals.
- [`BufferLogger`][termlog.logger.BufferLogger] captures errors, status and
  trace output in memory, for tests.
- [`VerboseLogger`][termlog.logger.VerboseLogger] holds each message back until
  the next one arrives (or `flush()` is called) and prints it prefixed with the
  milliseconds it was pending, which makes slow steps stand out.

This channel is distinct from the diagnostics logging configured in
[`termlog.config.logging`][termlog.config.logging].
"""

from __future__ import annotations

import io
import sys
import traceback
from abc import ABC, abstractmethod
from enum import Enum
from types import TracebackType
from typing import TYPE_CHECKING, TextIO, Union

from termlog.config.logging import get_logger
from termlog.status import AnsiStatus, Status
from termlog.terminal.ansi import get_terminal
from termlog.utils.streams import write_text
from termlog.utils.timer import Stopwatch

if TYPE_CHECKING:
    from termlog.config.logging import TermlogLogger
    from termlog.terminal.ansi import AnsiTerminal

logger: TermlogLogger = get_logger(__name__)

#: Accepted forms of the optional stack trace passed to `print_error()`.
StackTrace = Union[str, TracebackType, BaseException]

#: Messages pending at least this long get a bold elapsed-time prefix.
SLOW_MESSAGE_MS = 100


def format_stack_trace(stack_trace: StackTrace) -> str:
    """Render a stack trace as text without a trailing newline.

    Args:
        stack_trace (StackTrace): A preformatted string, a traceback object, or an
            exception (rendered with its traceback and message).

    Returns:
        str: The stack trace text.
    """
    if isinstance(stack_trace, BaseException):
        text = "".join(traceback.format_exception(stack_trace))
    elif isinstance(stack_trace, TracebackType):
        text = "".join(traceback.format_tb(stack_trace))
    else:
        text = stack_trace
    return text.rstrip("\n")


class Logger(ABC):
    """Interface shared by all program-output strategies.

    Args:
        terminal (AnsiTerminal | None): Shared terminal state. Defaults to
            [`get_terminal()`][termlog.terminal.ansi.get_terminal].

    Attributes:
        quiet (bool): Set by the caller to request terse output. The loggers in
            this module store it but do not filter on it; commands consult it.
        terminal (AnsiTerminal): Terminal consulted for every styled render.
    """

    quiet: bool
    terminal: AnsiTerminal

    def __init__(self, *, terminal: AnsiTerminal | None = None) -> None:
        self.quiet = False
        self.terminal = terminal or get_terminal()

    @property
    def is_verbose(self) -> bool:
        """Whether this logger shows trace output with timing information."""
        return False

    @property
    def supports_color(self) -> bool:
        """Color capability of the shared terminal."""
        return self.terminal.supports_color

    @supports_color.setter
    def supports_color(self, value: bool) -> None:
        # Writes through to the shared terminal, so every logger sees the change.
        self.terminal.supports_color = value

    @abstractmethod
    def print_error(self, message: str, stack_trace: StackTrace | None = None) -> None:
        """Display an error level message to the user.

        Commands should use this if they fail in some way.

        Args:
            message (str): The error text.
            stack_trace (StackTrace | None): Optional stack trace shown below it.
        """

    @abstractmethod
    def print_status(self, message: str, *, emphasis: bool = False, newline: bool = True) -> None:
        """Display normal output of the command.

        This should be used for things like progress messages, success messages,
        or just normal command output.

        Args:
            message (str): The status text.
            emphasis (bool): If True, render the text in bold.
            newline (bool): If True, end the output with a line break.
        """

    @abstractmethod
    def print_trace(self, message: str) -> None:
        """Display verbose tracing output.

        Users can turn this output on to help diagnose issues with the tool or
        with their setup.
        """

    @abstractmethod
    def start_progress(self, message: str) -> Status:
        """Start an indeterminate progress display.

        Args:
            message (str): Description of the work in progress.

        Returns:
            Status: A handle the caller must stop (or cancel) when done.
        """

    def flush(self) -> None:
        """Flush any buffered output."""


class StdoutLogger(Logger):
    """Logger writing straight to stdout (status) and stderr (errors).

    Trace output is dropped. Every output call first cancels the progress
    handle started by the previous `start_progress()`, if it is still live.

    Args:
        terminal (AnsiTerminal | None): Shared terminal state.
        out (TextIO | None): Stream for status output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        terminal: AnsiTerminal | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        super().__init__(terminal=terminal)
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr
        self._status: Status | None = None

    def _cancel_status(self) -> None:
        status, self._status = self._status, None
        if status is not None:
            status.cancel()

    def print_error(self, message: str, stack_trace: StackTrace | None = None) -> None:
        """Write ``message`` (and the optional stack trace) to stderr."""
        self._cancel_status()
        color: bool = self.terminal.supports_color
        write_text(message, file=self.err, color=color)
        if stack_trace is not None:
            write_text(format_stack_trace(stack_trace), file=self.err, color=color)

    def print_status(self, message: str, *, emphasis: bool = False, newline: bool = True) -> None:
        """Write ``message`` to stdout, bold when ``emphasis`` is set."""
        self._cancel_status()
        text: str = self.terminal.write_bold(message) if emphasis else message
        write_text(text, file=self.out, nl=newline, color=self.terminal.supports_color)

    def print_trace(self, message: str) -> None:
        """Ignore trace output."""

    def start_progress(self, message: str) -> Status:
        """Start a spinner on color terminals, else print ``message`` as status."""
        self._cancel_status()
        if self.terminal.supports_color:
            status = AnsiStatus(message, out=self.out, terminal=self.terminal)
            self._status = status
            return status
        self.print_status(message)
        return Status()


class BufferLogger(Logger):
    """Logger capturing all output in memory; intended for tests.

    The three buffers are independent and only ever grow. Their contents are
    exposed via `error_text`, `status_text` and `trace_text`.
    """

    def __init__(self, *, terminal: AnsiTerminal | None = None) -> None:
        super().__init__(terminal=terminal)
        self._error = io.StringIO()
        self._status = io.StringIO()
        self._trace = io.StringIO()

    @property
    def error_text(self) -> str:
        """Everything passed to `print_error()`, one line per call."""
        return self._error.getvalue()

    @property
    def status_text(self) -> str:
        """Everything passed to `print_status()`, with the requested line breaks."""
        return self._status.getvalue()

    @property
    def trace_text(self) -> str:
        """Everything passed to `print_trace()`, one line per call."""
        return self._trace.getvalue()

    def print_error(self, message: str, stack_trace: StackTrace | None = None) -> None:
        """Append ``message`` to the error buffer; the stack trace is not kept."""
        self._error.write(message + "\n")

    def print_status(self, message: str, *, emphasis: bool = False, newline: bool = True) -> None:
        """Append ``message`` to the status buffer; emphasis is not recorded."""
        self._status.write(message + "\n" if newline else message)

    def print_trace(self, message: str) -> None:
        """Append ``message`` to the trace buffer."""
        self._trace.write(message + "\n")

    def start_progress(self, message: str) -> Status:
        """Record ``message`` as status and return an inert handle."""
        self.print_status(message)
        return Status()


class LogType(Enum):
    """Kind of a message held by the `VerboseLogger`."""

    ERROR = "error"
    STATUS = "status"
    TRACE = "trace"


class LogMessage:
    """A message waiting to be emitted by the `VerboseLogger`.

    The stopwatch starts when the message is created, so the emitted prefix
    shows how long the step that followed the message took.
    """

    def __init__(
        self,
        type: LogType,
        message: str,
        stack_trace: StackTrace | None = None,
    ) -> None:
        self.type = type
        self.message = message
        self.stack_trace = stack_trace
        self.stopwatch = Stopwatch()

    def render(self, terminal: AnsiTerminal) -> tuple[str, str | None]:
        """Stop the stopwatch and render the message.

        Args:
            terminal (AnsiTerminal): Terminal consulted for bold rendering.

        Returns:
            tuple[str, str | None]: The prefixed message and, for errors with a
            stack trace, the indented trace text.
        """
        self.stopwatch.stop()

        millis: int = self.stopwatch.elapsed_milliseconds
        prefix: str = f"{millis:>4} ms • "
        indent: str = " " * len(prefix)
        if millis >= SLOW_MESSAGE_MS:
            prefix = terminal.write_bold(prefix[:-3]) + " • "
        body: str = self.message.replace("\n", "\n" + indent)

        if self.type is LogType.TRACE:
            return prefix + body, None
        trace: str | None = None
        if self.type is LogType.ERROR and self.stack_trace is not None:
            trace = indent + format_stack_trace(self.stack_trace).replace("\n", "\n" + indent)
        return prefix + terminal.write_bold(body), trace

    def emit(self, *, terminal: AnsiTerminal, out: TextIO, err: TextIO) -> None:
        """Write the rendered message: errors to ``err``, everything else to ``out``."""
        text, trace = self.render(terminal)
        color: bool = terminal.supports_color
        if self.type is LogType.ERROR:
            write_text(text, file=err, color=color)
            if trace is not None:
                write_text(trace, file=err, color=color)
        else:
            write_text(text, file=out, color=color)


class VerboseLogger(Logger):
    """Logger annotating each message with the time until the next one.

    Each call first emits the previously pending message, then stores the new
    one; `flush()` emits the last. ``emphasis`` and ``newline`` are accepted by
    `print_status()` for interface compatibility but every status line is
    printed bold and on its own line.

    Args:
        terminal (AnsiTerminal | None): Shared terminal state.
        out (TextIO | None): Stream for status and trace output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        terminal: AnsiTerminal | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        super().__init__(terminal=terminal)
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr
        self.last_message: LogMessage | None = None

    @property
    def is_verbose(self) -> bool:
        """Always True."""
        return True

    def print_error(self, message: str, stack_trace: StackTrace | None = None) -> None:
        """Emit the pending message and hold back this error."""
        self._emit()
        self.last_message = LogMessage(LogType.ERROR, message, stack_trace)

    def print_status(self, message: str, *, emphasis: bool = False, newline: bool = True) -> None:
        """Emit the pending message and hold back this status line."""
        self._emit()
        self.last_message = LogMessage(LogType.STATUS, message)

    def print_trace(self, message: str) -> None:
        """Emit the pending message and hold back this trace line."""
        self._emit()
        self.last_message = LogMessage(LogType.TRACE, message)

    def start_progress(self, message: str) -> Status:
        """Record ``message`` as status and return an inert handle."""
        self.print_status(message)
        return Status()

    def flush(self) -> None:
        """Emit the pending message, if any."""
        self._emit()

    def _emit(self) -> None:
        pending, self.last_message = self.last_message, None
        if pending is not None:
            pending.emit(terminal=self.terminal, out=self.out, err=self.err)


def create_logger(
    *,
    verbose: bool = False,
    terminal: AnsiTerminal | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Logger:
    """Return the logger a command should use for the whole process.

    Args:
        verbose (bool): If True, return a `VerboseLogger`; otherwise a `StdoutLogger`.
        terminal (AnsiTerminal | None): Shared terminal state.
        out (TextIO | None): Stream for status output.
        err (TextIO | None): Stream for error output.

    Returns:
        Logger: The selected logger.
    """
    cls: type[StdoutLogger | VerboseLogger] = VerboseLogger if verbose else StdoutLogger
    logger.debug("selected %s", cls.__name__)
    return cls(terminal=terminal, out=out, err=err)
