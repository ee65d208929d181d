"""Unit tests for the monotonic test deadline."""

from __future__ import annotations

import pytest

from kmh.timing import Deadline


def test_deadline_counts_down_on_injected_clock() -> None:
    clock = [100.0]

    def now_fn() -> float:
        return clock[0]

    deadline = Deadline(5.0, now_fn=now_fn)
    assert deadline.at == 105.0
    assert deadline.remaining() == pytest.approx(5.0)
    assert not deadline.expired()

    clock[0] = 104.5
    assert deadline.remaining() == pytest.approx(0.5)
    assert not deadline.expired()

    clock[0] = 105.0
    assert deadline.expired()
    assert deadline.remaining() == 0.0


def test_remaining_never_negative() -> None:
    clock = [0.0]
    deadline = Deadline(1.0, now_fn=lambda: clock[0])
    clock[0] = 50.0
    assert deadline.remaining() == 0.0
    assert deadline.expired()


def test_default_clock_is_monotonic() -> None:
    deadline = Deadline(60.0)
    assert not deadline.expired()
    assert 0.0 < deadline.remaining() <= 60.0
