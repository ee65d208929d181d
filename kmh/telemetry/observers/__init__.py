"""Observability hooks for the packet timer.

The timer calls its observer unconditionally on every read and boundary
event; whether anything is emitted is decided by the observer, not by
branches in the read path.

Observers:
    - base: ProbeObserver, the no-op base
    - logging: LoggingObserver, DEBUG trace of reads and boundaries
    - metrics: MetricsObserver, OpenTelemetry counters and histograms
    - fanout: FanoutObserver and the build_observer factory
"""

from .base import ProbeObserver
from .logging import LoggingObserver
from .metrics import MetricsObserver
from .fanout import FanoutObserver, build_observer

__all__ = [
    "ProbeObserver",
    "LoggingObserver",
    "MetricsObserver",
    "FanoutObserver",
    "build_observer",
]
