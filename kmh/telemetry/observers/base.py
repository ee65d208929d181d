"""No-op observer base for packet timer events."""

from __future__ import annotations


class ProbeObserver:
    """Receives timer events. Every hook is a no-op by default."""

    def on_read(self, nbytes: int, cursor: int) -> None:
        """Called after each body read with the bytes read and the new cursor."""

    def on_boundary(self, delta_ns: int, accepted: bool) -> None:
        """Called for every completed packet; ``accepted`` is False when filtered."""

    def on_complete(self, reason: str) -> None:
        """Called once when the timer fires its completion signal."""

    def on_error(self, category: str) -> None:
        """Called when the run fails, with the error category label."""


__all__ = ["ProbeObserver"]
