"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- defaults: env-backed probe defaults
- exit_codes: process exit codes
- logging: log level and format
- telemetry: meter name and metric specs
"""

from .defaults import (
    DEFAULT_PACKET_SIZE,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_URL,
    DEFAULT_SCHEME,
    DEFAULT_INSECURE,
    DEFAULT_TIMEOUT_S,
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_NOISE_FILTER_S,
    NS_PER_SECOND,
)
from .exit_codes import (
    EXIT_OK,
    EXIT_REQUEST_FAILED,
    EXIT_INVALID_CONFIG,
    EXIT_NO_SAMPLES,
)

__all__ = [
    "DEFAULT_PACKET_SIZE",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_URL",
    "DEFAULT_SCHEME",
    "DEFAULT_INSECURE",
    "DEFAULT_TIMEOUT_S",
    "DEFAULT_CONNECT_TIMEOUT_S",
    "DEFAULT_NOISE_FILTER_S",
    "NS_PER_SECOND",
    "EXIT_OK",
    "EXIT_REQUEST_FAILED",
    "EXIT_INVALID_CONFIG",
    "EXIT_NO_SAMPLES",
]
