"""Probe defaults.

Values are sourced from environment variables; each one is the default of
the matching command-line flag.
"""

import os


# Amount of data the periodic endpoint sends per period (one packet)
DEFAULT_PACKET_SIZE = int(os.getenv("KMH_SIZE", "512"))

# Bytes requested from the response body per read
DEFAULT_BUFFER_SIZE = int(os.getenv("KMH_BUFFER", "512"))

DEFAULT_URL = os.getenv("KMH_URL", "localhost:443/periodic")
DEFAULT_SCHEME = "https"

# Self-signed certificates are the common case for local periodic servers
DEFAULT_INSECURE = (os.getenv("KMH_INSECURE", "1") or "1").strip().lower() not in {"0", "false", "no", "off"}

DEFAULT_TIMEOUT_S = float(os.getenv("KMH_TIMEOUT_S", "5"))
DEFAULT_CONNECT_TIMEOUT_S = float(os.getenv("KMH_CONNECT_TIMEOUT_S", "10"))

# Inter-packet deltas at or below this are treated as bursts and dropped
DEFAULT_NOISE_FILTER_S = float(os.getenv("KMH_NOISE_FILTER_S", "1.0"))

NS_PER_SECOND = 1_000_000_000


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
]
