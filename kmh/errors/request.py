"""Request establishment exceptions."""

from __future__ import annotations

from .base import ProbeError


class RequestError(ProbeError):
    """Raised when the initial GET cannot be established.

    Covers DNS, connection, TLS and protocol failures surfaced by the
    transport before response headers arrive. The original transport
    exception is chained as ``__cause__``.

    Attributes:
        url: The URL that was requested.
    """

    def __init__(self, url: str, message: str | None = None) -> None:
        super().__init__(message or f"request to {url} failed")
        self.url = url


__all__ = ["RequestError"]
