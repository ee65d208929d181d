"""DEBUG trace of timer activity."""

from __future__ import annotations

import logging

from .base import ProbeObserver
from ...config.defaults import NS_PER_SECOND

logger = logging.getLogger(__name__)


class LoggingObserver(ProbeObserver):
    """Trace timer activity to a logger at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_read(self, nbytes: int, cursor: int) -> None:
        self._log.debug("read %d bytes, cursor now %d", nbytes, cursor)

    def on_boundary(self, delta_ns: int, accepted: bool) -> None:
        action = "adding" if accepted else "skipping"
        self._log.debug("full packet; %s delta %.6fs", action, delta_ns / NS_PER_SECOND)

    def on_complete(self, reason: str) -> None:
        self._log.debug("ending statistical read (%s)", reason)

    def on_error(self, category: str) -> None:
        self._log.debug("probe failed (%s)", category)


__all__ = ["LoggingObserver"]
