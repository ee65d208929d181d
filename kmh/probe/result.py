"""Probe result container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import ProbeConfig
from ..config.defaults import NS_PER_SECOND


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of one measurement run.

    Attributes:
        config: The settings the run used.
        deltas_ns: Accepted inter-packet deltas, in arrival order.
        average_delta_s: Mean accepted delta in seconds.
        implied_buffer_size: ``average_delta_s * packet_size``.
        boundary_count: Packets completed, filtered or not.
        bytes_total: Body bytes consumed.
        completion_reason: What ended the run (``deadline``, ``eof``, ``error``, ``closed``).
        stream_error: Message of a mid-stream read failure, if one occurred.
    """

    config: ProbeConfig
    deltas_ns: tuple[int, ...]
    average_delta_s: float
    implied_buffer_size: float
    boundary_count: int
    bytes_total: int
    completion_reason: str | None = None
    stream_error: str | None = None

    @property
    def sample_count(self) -> int:
        return len(self.deltas_ns)

    def to_dict(self) -> dict[str, Any]:
        return {
            "packet_size": self.config.packet_size,
            "buffer_size": self.config.buffer_size,
            "url": self.config.target_url,
            "timeout_s": self.config.timeout_s,
            "samples": self.sample_count,
            "deltas_s": [delta / NS_PER_SECOND for delta in self.deltas_ns],
            "average_delta_s": self.average_delta_s,
            "implied_buffer_size": self.implied_buffer_size,
            "boundary_count": self.boundary_count,
            "bytes_total": self.bytes_total,
            "completion_reason": self.completion_reason,
            "stream_error": self.stream_error,
        }


__all__ = ["ProbeResult"]
