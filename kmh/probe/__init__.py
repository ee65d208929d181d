"""Probe orchestration: run settings, client setup, drain loop, driver and reporting."""

from .drain import drain
from .config import ProbeConfig
from .driver import run_probe
from .result import ProbeResult
from .client import build_client, open_stream
from .reporting import format_options, format_result, print_options, print_result

__all__ = [
    "ProbeConfig",
    "ProbeResult",
    "build_client",
    "drain",
    "format_options",
    "format_result",
    "open_stream",
    "print_options",
    "print_result",
    "run_probe",
]
