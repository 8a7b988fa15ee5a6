# termlog:header:start
#
#   project      : TermLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Pytest configuration for the TermLog test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should never depend on the developer's terminal: every fixture that
    renders output builds its own [`AnsiTerminal`][termlog.terminal.ansi.AnsiTerminal]
    with an explicit ``supports_color`` and writes to in-memory streams.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from termlog.config import logging
from termlog.terminal.ansi import AnsiTerminal, get_terminal

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.slow)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class FakeClock:
    """Manually advanced replacement for `time.monotonic`."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak into tests.

    Removes the variables TermLog consults (diagnostics level and color
    signals) so each test states the environment it depends on.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("TERMLOG_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")


@pytest.fixture(autouse=True)
def restore_logging() -> Any:
    """Reattach diagnostics logging to the test session's stderr after each test.

    CLI tests configure logging against the streams of a `CliRunner`, which are
    closed once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture(autouse=True)
def fresh_process_terminal() -> Any:
    """Give each test its own process-wide terminal.

    `get_terminal()` is cached and captures `sys.stdin` on first use; CLI tests
    create it inside a `CliRunner` whose streams do not outlive the invocation.
    """
    get_terminal.cache_clear()
    yield
    get_terminal.cache_clear()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure diagnostics logging at TRACE level for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def color_terminal() -> AnsiTerminal:
    """Terminal with ANSI support and an empty input stream."""
    return AnsiTerminal(supports_color=True, stdin=io.StringIO(""))


@pytest.fixture
def plain_terminal() -> AnsiTerminal:
    """Terminal without ANSI support and an empty input stream."""
    return AnsiTerminal(supports_color=False, stdin=io.StringIO(""))


@pytest.fixture
def out() -> io.StringIO:
    """In-memory replacement for stdout."""
    return io.StringIO()


@pytest.fixture
def err() -> io.StringIO:
    """In-memory replacement for stderr."""
    return io.StringIO()


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    """Drive every `Stopwatch` from a manually advanced clock."""
    clock = FakeClock()
    monkeypatch.setattr("termlog.utils.timer.monotonic", clock)
    return clock
