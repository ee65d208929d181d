"""KMH probe package.

Client-side benchmark for periodic HTTP endpoints. One streaming GET is
issued, the response body is read through a packet timer that records
how long each fixed-size packet takes to arrive, and the mean of the
slow (non-burst) deltas is scaled by the packet size into an implied
buffer size.

Architecture Overview:
    - cli.py: command-line entry point
    - config/: env-backed defaults, log settings and exit codes
    - errors/: exception hierarchy and classification
    - timing/: deadline, completion signal, body reader, packet timer
    - probe/: ProbeConfig, HTTP client, drain loop, driver, reporting
    - telemetry/: observer hooks and OpenTelemetry instruments
    - stats.py: averaging

Example:
    $ kmh --url localhost:8443/periodic --size 512 --timeout 10
"""

from .probe import ProbeConfig, ProbeResult, run_probe

__all__ = ["ProbeConfig", "ProbeResult", "run_probe"]
