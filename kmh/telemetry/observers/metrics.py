"""OpenTelemetry recording of timer activity."""

from __future__ import annotations

from .base import ProbeObserver
from ..instruments import MetricInstruments, get_metrics
from ...config.defaults import NS_PER_SECOND


class MetricsObserver(ProbeObserver):
    """Record timer activity on OpenTelemetry instruments."""

    def __init__(self, instruments: MetricInstruments | None = None) -> None:
        self._metrics = instruments or get_metrics()

    def on_read(self, nbytes: int, cursor: int) -> None:
        if nbytes:
            self._metrics.bytes_read.add(nbytes)

    def on_boundary(self, delta_ns: int, accepted: bool) -> None:
        self._metrics.boundary_events.add(1, {"accepted": accepted})
        if accepted:
            self._metrics.packet_delta.record(delta_ns / NS_PER_SECOND)

    def on_complete(self, reason: str) -> None:
        self._metrics.probe_completions.add(1, {"reason": reason})

    def on_error(self, category: str) -> None:
        self._metrics.probe_errors.add(1, {"category": category})


__all__ = ["MetricsObserver"]
