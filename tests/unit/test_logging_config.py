# termlog:header:start
#
#   project      : TermLog
#   file         : test_logging_config.py
#   file_relpath : tests/unit/test_logging_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Tests for the diagnostics logging setup in `termlog.config.logging`."""

from __future__ import annotations

import logging

import pytest

from termlog.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    TermlogLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("warn", logging.WARNING),
        ("10", 10),
        ("verbose", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """It should map level names and numbers, and ignore unknown values."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """It should return None when the variable is absent."""
    assert resolve_env_log_level() is None


def test_setup_logging_defaults_to_critical() -> None:
    """It should keep diagnostics silent unless a level is requested."""
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1


def test_setup_logging_honors_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should read the level from the environment when none is passed."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_replaces_handlers() -> None:
    """It should not stack handlers across repeated calls."""
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.INFO)
    assert len(logging.getLogger().handlers) == 1


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """It should return a logger with a working trace() method."""
    log = get_logger("termlog.tests.trace")
    assert isinstance(log, TermlogLogger)

    with caplog.at_level(TRACE_LEVEL):
        log.trace("tick %d", 3)

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "tick 3")]


def test_chalk_formatter_keeps_message_text() -> None:
    """It should wrap the formatted message without altering it."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "[WARNING] careful" in formatter.format(record)
