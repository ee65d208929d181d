"""MetricInstruments registry: typed accessors for the probe's OTel instruments."""

from __future__ import annotations

import logging
from opentelemetry import metrics
from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    METRIC_BYTES_READ,
    METRIC_PROBE_ERRORS,
    METRIC_PACKET_DELTA,
    METRIC_BOUNDARY_EVENTS,
    METRIC_PROBE_COMPLETIONS,
)

logger = logging.getLogger(__name__)


def _histogram(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Histogram:
    name, unit, desc = spec
    return meter.create_histogram(name, unit=unit, description=desc)


def _counter(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Counter:
    name, unit, desc = spec
    return meter.create_counter(name, unit=unit, description=desc)


class MetricInstruments:
    """Holds all OTel metric instruments created from config specs."""

    __slots__ = (
        "packet_delta",
        "bytes_read",
        "boundary_events",
        "probe_completions",
        "probe_errors",
    )

    def __init__(self, meter: metrics.Meter) -> None:
        # Histograms
        self.packet_delta = _histogram(meter, METRIC_PACKET_DELTA)
        # Counters
        self.bytes_read = _counter(meter, METRIC_BYTES_READ)
        self.boundary_events = _counter(meter, METRIC_BOUNDARY_EVENTS)
        self.probe_completions = _counter(meter, METRIC_PROBE_COMPLETIONS)
        self.probe_errors = _counter(meter, METRIC_PROBE_ERRORS)


_metrics: MetricInstruments | None = None


def get_metrics() -> MetricInstruments:
    """Return the global MetricInstruments (no-op meter if no SDK is installed)."""
    global _metrics  # noqa: PLW0603
    if _metrics is None:
        meter = metrics.get_meter(OTEL_SERVICE_NAME)
        _metrics = MetricInstruments(meter)
        logger.debug("Telemetry instruments created for meter %s", OTEL_SERVICE_NAME)
    return _metrics


__all__ = ["MetricInstruments", "get_metrics"]
