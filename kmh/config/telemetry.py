"""Telemetry configuration: meter name and metric specs."""

import os

OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "kmh-probe")

# ---------------------------------------------------------------------------
# Metric spec tuples: (name, unit, description)
# ---------------------------------------------------------------------------

# Histograms
METRIC_PACKET_DELTA = ("kmh.packet_delta", "s", "Accepted inter-packet arrival time")

# Counters
METRIC_BYTES_READ = ("kmh.bytes_read", "By", "Response body bytes consumed")
METRIC_BOUNDARY_EVENTS = ("kmh.boundary_events", "{packet}", "Completed packets, filtered or not")
METRIC_PROBE_COMPLETIONS = ("kmh.probe_completions", "{probe}", "Probe runs finished, by reason")
METRIC_PROBE_ERRORS = ("kmh.probe_errors", "{error}", "Probe failures, by category")


__all__ = [
    "OTEL_SERVICE_NAME",
    "METRIC_PACKET_DELTA",
    "METRIC_BYTES_READ",
    "METRIC_BOUNDARY_EVENTS",
    "METRIC_PROBE_COMPLETIONS",
    "METRIC_PROBE_ERRORS",
]
