# termlog:header:start
#
#   project      : TermLog
#   file         : test_timer.py
#   file_relpath : tests/unit/test_timer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Unit tests for the stopwatch and repeating timer in `termlog.utils.timer`."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from termlog.utils.timer import RepeatingTimer, Stopwatch
from tests.conftest import mark_slow

if TYPE_CHECKING:
    from tests.conftest import FakeClock


def test_stopwatch_measures_and_freezes(fake_clock: FakeClock) -> None:
    """It should accumulate time while running and freeze it when stopped."""
    watch = Stopwatch()
    fake_clock.advance(0.25)
    assert watch.elapsed_milliseconds == 250

    watch.stop()
    fake_clock.advance(1.0)
    assert watch.is_running is False
    assert watch.elapsed_milliseconds == 250

    watch.start()
    fake_clock.advance(0.5)
    assert watch.elapsed_milliseconds == 750


def test_stopwatch_can_start_paused(fake_clock: FakeClock) -> None:
    """It should not measure anything until started."""
    watch = Stopwatch(start=False)
    fake_clock.advance(2.0)
    assert watch.elapsed == 0.0


@mark_slow
def test_repeating_timer_fires_until_cancelled() -> None:
    """It should call back repeatedly and stop after cancel()."""
    fired = threading.Event()
    calls: list[int] = []

    def _callback(timer: RepeatingTimer) -> None:
        calls.append(1)
        if len(calls) >= 3:
            fired.set()

    timer = RepeatingTimer(0.005, _callback)
    assert fired.wait(2.0)
    timer.cancel()
    timer.join(2.0)
    count = len(calls)

    assert timer.is_active is False
    assert count >= 3
    # No further callbacks once the thread has exited.
    threading.Event().wait(0.03)
    assert len(calls) == count


@mark_slow
def test_repeating_timer_cancel_is_idempotent_and_safe_from_callback() -> None:
    """It should allow cancel() from inside the callback and repeated cancel() calls."""
    done = threading.Event()

    def _callback(timer: RepeatingTimer) -> None:
        timer.cancel()
        timer.cancel()
        timer.join()
        done.set()

    timer = RepeatingTimer(0.005, _callback)
    assert done.wait(2.0)
    timer.cancel()
    timer.join(2.0)
    assert timer.is_active is False
