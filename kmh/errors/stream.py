"""Streaming exceptions.

This module provides the exception raised when the response body fails
mid-stream for any reason other than end-of-stream.
"""


from .base import ProbeError


class StreamReadError(ProbeError):
    """Raised by the packet timer when the underlying body read fails.

    The probe driver logs it and still reports any deltas collected
    before the failure. The transport exception is chained as ``__cause__``.
    """


__all__ = ["StreamReadError"]
