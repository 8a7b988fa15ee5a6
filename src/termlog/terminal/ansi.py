# termlog:header:start
#
#   project      : TermLog
#   file         : ansi.py
#   file_relpath : src/termlog/terminal/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""ANSI terminal capabilities shared by every logger and progress handle.

The [`AnsiTerminal`][termlog.terminal.ansi.AnsiTerminal] holds a single mutable
capability flag, ``supports_color``, plus the escape sequences TermLog emits and
the function-key sequences it recognizes when decoding keyboard input.

One instance is meant to exist per process (see
[`get_terminal`][termlog.terminal.ansi.get_terminal]); loggers and progress
handles receive it through their constructors so that flipping
``supports_color`` is observed by all of them at the next render.
"""

from __future__ import annotations

import functools
import os
import sys
from typing import TYPE_CHECKING, Any, ClassVar, Final, TextIO

import click

from termlog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from termlog.config.logging import TermlogLogger

logger: TermlogLogger = get_logger(__name__)

#: Terminal types that cannot render escape sequences.
DUMB_TERMINALS: Final[frozenset[str]] = frozenset({"dumb"})


def detect_color_support(environ: Mapping[str, str] | None = None) -> bool:
    """Return True unless ``TERM`` is unset, empty or names a dumb terminal.

    Args:
        environ (Mapping[str, str] | None): Environment to inspect. Defaults to
            ``os.environ``.

    Returns:
        bool: Whether ANSI escape sequences should be emitted.
    """
    env = os.environ if environ is None else environ
    term: str | None = env.get("TERM")
    return bool(term) and term not in DUMB_TERMINALS


class AnsiTerminal:
    """Process-wide terminal capability state.

    Args:
        supports_color (bool | None): Initial color capability. When None, it is
            detected from the ``TERM`` environment variable.
        stdin (TextIO | None): Input stream used for keystroke capture.
            Defaults to `sys.stdin`.

    Attributes:
        supports_color (bool): Whether ANSI escape sequences are emitted. Mutable;
            every render consults the current value.
        stdin (TextIO): Input stream used by `on_char_input()`.
    """

    KEY_F1: ClassVar[str] = "\x1bOP"
    KEY_F5: ClassVar[str] = "\x1b[15~"
    KEY_F10: ClassVar[str] = "\x1b[21~"

    #: Named function keys recognized by `on_key_input()`.
    KEY_NAMES: ClassVar[dict[str, str]] = {
        KEY_F1: "F1",
        KEY_F5: "F5",
        KEY_F10: "F10",
    }

    BOLD: ClassVar[str] = "\x1b[1m"
    RESET: ClassVar[str] = "\x1b[0m"
    CLEAR: ClassVar[str] = "\x1b[2J\x1b[H"

    supports_color: bool
    stdin: TextIO

    def __init__(self, *, supports_color: bool | None = None, stdin: TextIO | None = None) -> None:
        if supports_color is None:
            supports_color = detect_color_support()
        self.supports_color = supports_color
        self.stdin = stdin or sys.stdin
        self._saved_tty_attrs: list[Any] | None = None
        logger.debug("terminal initialized (supports_color=%s)", supports_color)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> AnsiTerminal:
        """Create a terminal whose color capability is read from ``environ``."""
        return cls(supports_color=detect_color_support(environ))

    def write_bold(self, text: str) -> str:
        """Return ``text`` wrapped in bold/reset sequences when color is supported.

        Args:
            text (str): Text to emphasize.

        Returns:
            str: The bold text, or ``text`` unchanged on a plain terminal.
        """
        if not self.supports_color:
            return text
        return click.style(text, bold=True)

    def clear_screen(self) -> str:
        """Return the clear-and-home sequence, or two newlines on a plain terminal."""
        return self.CLEAR if self.supports_color else "\n\n"

    @property
    def single_char_mode(self) -> bool:
        """Whether the input stream currently delivers one keystroke at a time."""
        return self._saved_tty_attrs is not None

    @single_char_mode.setter
    def single_char_mode(self, value: bool) -> None:
        """Switch the input stream between per-keystroke and line-buffered delivery.

        Only interactive POSIX input is affected; when the input stream is not
        a TTY the call is recorded in the diagnostics log and otherwise ignored.
        """
        if value == self.single_char_mode:
            return
        try:
            is_tty = self.stdin.isatty()
        except ValueError:
            is_tty = False
        if not is_tty:
            logger.debug("single_char_mode=%s ignored: input is not a TTY", value)
            return

        import termios
        import tty

        fd: int = self.stdin.fileno()
        if value:
            self._saved_tty_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        else:
            saved = self._saved_tty_attrs
            self._saved_tty_attrs = None
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.trace("single_char_mode=%s on fd %d", value, fd)

    def on_char_input(self) -> Iterator[str]:
        """Yield characters from the input stream as they arrive.

        Useful when the terminal is in `single_char_mode`. The iterator is lazy
        and ends when the stream is closed (EOF). Each call starts a new
        iterator over the same process input.

        Yields:
            str: One decoded character per iteration.
        """
        while True:
            ch: str = self.stdin.read(1)
            if not ch:
                return
            yield ch

    def on_key_input(self) -> Iterator[str]:
        """Yield keys from the input stream, folding function-key sequences.

        Escape sequences listed in `KEY_NAMES` are yielded as a single item
        equal to the matching ``KEY_*`` constant. Any other escape prefix is
        yielded character by character.

        Yields:
            str: A single character or one of the ``KEY_*`` sequences.
        """
        chars: Iterator[str] = self.on_char_input()
        for ch in chars:
            if ch != "\x1b":
                yield ch
                continue
            pending: str = ch
            while self._is_key_prefix(pending):
                nxt: str | None = next(chars, None)
                if nxt is None:
                    break
                pending += nxt
            if pending in self.KEY_NAMES:
                yield pending
            else:
                yield from pending

    def _is_key_prefix(self, text: str) -> bool:
        return any(code != text and code.startswith(text) for code in self.KEY_NAMES)


@functools.cache
def get_terminal() -> AnsiTerminal:
    """Return the process-wide terminal, creating it from the environment on first use."""
    return AnsiTerminal()
