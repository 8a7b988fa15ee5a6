# termlog:header:start
#
#   project      : TermLog
#   file         : streams.py
#   file_relpath : src/termlog/utils/streams.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Low-level stream writing shared by loggers and progress handles."""

from __future__ import annotations

from typing import TextIO

import click

from termlog.core.errors import OutputStreamError


def write_text(text: str, *, file: TextIO, nl: bool = True, color: bool = False) -> None:
    """Write ``text`` to ``file`` through `click.echo` and flush it.

    Args:
        text (str): Text to write.
        file (TextIO): Destination stream.
        nl (bool): If True, append a newline.
        color (bool): If True, keep ANSI sequences even when ``file`` is not a TTY.
            If False, Click strips them from non-interactive streams.

    Raises:
        OutputStreamError: If the underlying write fails. This is not retried.
    """
    try:
        click.echo(text, nl=nl, file=file, color=color)
    except OSError as exc:
        name: str = getattr(file, "name", repr(file))
        raise OutputStreamError(f"Cannot write to {name}: {exc}") from exc
