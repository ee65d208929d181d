"""Public telemetry API: re-exports for convenience."""

from .instruments import MetricInstruments, get_metrics
from .observers import (
    ProbeObserver,
    FanoutObserver,
    LoggingObserver,
    MetricsObserver,
    build_observer,
)

__all__ = [
    "MetricInstruments",
    "get_metrics",
    "ProbeObserver",
    "LoggingObserver",
    "MetricsObserver",
    "FanoutObserver",
    "build_observer",
]
