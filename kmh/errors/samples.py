"""Empty-measurement exception."""

from __future__ import annotations

from .base import ProbeError


class NoSamplesError(ProbeError):
    """Raised when a probe run ends without a single accepted delta.

    Reported instead of a NaN or zero throughput so an empty measurement
    is never mistaken for a tiny one.

    Attributes:
        boundary_count: Packets completed during the run (filtered or not).
        bytes_total: Body bytes consumed during the run.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        boundary_count: int | None = None,
        bytes_total: int | None = None,
    ) -> None:
        super().__init__(message or "no inter-packet deltas were recorded")
        self.boundary_count = boundary_count
        self.bytes_total = bytes_total


__all__ = ["NoSamplesError"]
