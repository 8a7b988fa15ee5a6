# termlog:header:start
#
#   project      : TermLog
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import pytest

from termlog.constants import TERMLOG_VERSION
from tests.cli.conftest import assert_SUCCESS, buffered, run_cli

pytestmark = pytest.mark.cli


def test_version_outputs_installed_version() -> None:
    """It should print the installed distribution version (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == TERMLOG_VERSION


def test_version_goes_through_logger() -> None:
    """It should print through the program-output logger."""
    logger, terminal = buffered()
    result = run_cli(["version"], logger=logger, terminal=terminal)

    assert_SUCCESS(result)
    assert logger.status_text == TERMLOG_VERSION + "\n"
    assert result.stdout == ""
