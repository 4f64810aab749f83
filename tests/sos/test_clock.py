"""Unit tests for /src/sos/clock.py"""

import threading
from unittest.mock import Mock

import pytest

from src.sos.clock import MatchClock

FAST = 0.01


def test_clock_stops_when_callback_says_so() -> None:
    """The callback returns False once the match is over"""
    calls: list[int] = []
    done = threading.Event()

    def _on_tick() -> bool:
        calls.append(1)
        if len(calls) == 3:
            done.set()
            return False
        return True

    clock = MatchClock(_on_tick, interval=FAST)
    clock.start()
    assert done.wait(timeout=5)
    clock.cancel()
    assert len(calls) == 3
    assert not clock.running


def test_cancel_stops_ticking() -> None:
    on_tick = Mock(return_value=True)
    clock = MatchClock(on_tick, interval=FAST)
    clock.start()
    assert clock.running
    clock.cancel()
    assert not clock.running

    count = on_tick.call_count
    threading.Event().wait(FAST * 5)
    assert on_tick.call_count == count


def test_start_twice_keeps_one_thread() -> None:
    clock = MatchClock(Mock(return_value=True), interval=FAST)
    clock.start()
    thread = clock._thread
    clock.start()
    assert clock._thread is thread
    clock.cancel()


def test_cancel_before_start() -> None:
    """Tearing down a match that never started its clock is fine"""
    clock = MatchClock(Mock(return_value=True), interval=FAST)
    clock.cancel()
    assert not clock.running


@pytest.mark.parametrize("interval", [0, -1.0])
def test_invalid_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        MatchClock(Mock(return_value=True), interval=interval)
