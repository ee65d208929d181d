"""Observer that forwards to several others, plus the default observer factory."""

from __future__ import annotations

from collections.abc import Iterable

from .base import ProbeObserver
from .logging import LoggingObserver
from .metrics import MetricsObserver


class FanoutObserver(ProbeObserver):
    """Forward every event to each wrapped observer in order."""

    def __init__(self, observers: Iterable[ProbeObserver]) -> None:
        self._observers = tuple(observers)

    def on_read(self, nbytes: int, cursor: int) -> None:
        for observer in self._observers:
            observer.on_read(nbytes, cursor)

    def on_boundary(self, delta_ns: int, accepted: bool) -> None:
        for observer in self._observers:
            observer.on_boundary(delta_ns, accepted)

    def on_complete(self, reason: str) -> None:
        for observer in self._observers:
            observer.on_complete(reason)

    def on_error(self, category: str) -> None:
        for observer in self._observers:
            observer.on_error(category)


def build_observer(*, debug: bool = False) -> ProbeObserver:
    """Return the default observer: metrics always, DEBUG tracing when requested."""
    if debug:
        return FanoutObserver((MetricsObserver(), LoggingObserver()))
    return MetricsObserver()


__all__ = ["FanoutObserver", "build_observer"]
