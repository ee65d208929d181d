"""Absolute test deadline on a monotonic clock."""

from __future__ import annotations

import time
from collections.abc import Callable

# Type alias for injectable time functions (used in testing)
TimeFn = Callable[[], float]


class Deadline:
    """A fixed point in time, ``timeout_s`` after construction.

    Shared by the driver and the packet timer; the timer checks it on every
    read and bounds each read by ``remaining()``.
    """

    __slots__ = ("_now_fn", "_at", "timeout_s")

    def __init__(self, timeout_s: float, *, now_fn: TimeFn | None = None) -> None:
        self._now_fn = now_fn or time.monotonic
        self.timeout_s = float(timeout_s)
        self._at = self._now_fn() + self.timeout_s

    @property
    def at(self) -> float:
        return self._at

    def remaining(self) -> float:
        """Seconds left before expiry, never negative."""
        return max(0.0, self._at - self._now_fn())

    def expired(self) -> bool:
        return self._now_fn() >= self._at


__all__ = ["Deadline", "TimeFn"]
