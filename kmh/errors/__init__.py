"""Centralized exception classes for the probe.

Organization:
    - base.py: ProbeError root
    - configuration.py: invalid settings with error codes
    - request.py: failures establishing the GET
    - stream.py: mid-stream body failures
    - samples.py: runs that recorded no deltas
    - classify.py: exception-to-label mapping
"""

from .base import ProbeError
from .request import RequestError
from .stream import StreamReadError
from .samples import NoSamplesError
from .classify import classify_error
from .configuration import ConfigurationError

__all__ = [
    "ProbeError",
    # Configuration
    "ConfigurationError",
    # Transport
    "RequestError",
    "StreamReadError",
    # Measurement
    "NoSamplesError",
    # Classification
    "classify_error",
]
