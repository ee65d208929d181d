"""Streaming packet timer.

Wraps a response body and turns its byte stream into timed packet
completions. Every ``packet_size`` bytes consumed is one boundary event;
the wall-clock time between consecutive boundary events is a delta, and
deltas longer than the noise filter are kept as samples.

A single read may complete zero, one or several packets: the boundary
loop consumes the bytes that finish the current packet, resets the
cursor, and repeats while enough bytes remain, folding any surplus into
the cursor for the next packet.

Termination:
    The timer fires its completion signal exactly once, on the first of

    1. deadline expiry (observed on the read that races it),
    2. natural end of stream,
    3. a body read failure (raised as StreamReadError),
    4. ``close()``.

    After that every ``read`` returns ``b""`` without touching the body, so
    the delta sequence is frozen once the signal has fired.

Usage:
    timer = PacketTimer(deadline, signal, 512, BodyReader.from_response(resp))
    while await timer.read(512):
        pass
    samples = timer.deltas
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from .signal import CompletionSignal
from .source import ByteSource
from .deadline import Deadline
from ..errors import StreamReadError, ConfigurationError
from ..telemetry.observers import ProbeObserver
from ..config.defaults import NS_PER_SECOND, DEFAULT_NOISE_FILTER_S

logger = logging.getLogger(__name__)

# Monotonic nanosecond clock (injectable for tests)
ClockNs = Callable[[], int]


class PacketTimer:
    """Time packet completions on a byte stream until a deadline.

    Attributes:
        packet_size: Bytes per logical packet.
        noise_filter_ns: Deltas must be strictly greater than this to be kept.
    """

    def __init__(
        self,
        deadline: Deadline,
        signal: CompletionSignal,
        packet_size: int,
        body: ByteSource,
        *,
        noise_filter_ns: int | None = None,
        clock: ClockNs | None = None,
        observer: ProbeObserver | None = None,
    ) -> None:
        if isinstance(packet_size, bool) or not isinstance(packet_size, int) or packet_size <= 0:
            raise ConfigurationError(
                "invalid_packet_size",
                f"packet size must be a positive integer, got {packet_size!r}",
            )
        if noise_filter_ns is None:
            noise_filter_ns = int(DEFAULT_NOISE_FILTER_S * NS_PER_SECOND)
        if noise_filter_ns < 0:
            raise ConfigurationError(
                "invalid_noise_filter",
                f"noise filter must not be negative, got {noise_filter_ns!r}",
            )

        self.packet_size = packet_size
        self.noise_filter_ns = int(noise_filter_ns)
        self._deadline = deadline
        self._signal = signal
        self._body = body
        self._clock = clock or time.perf_counter_ns
        self._observer = observer or ProbeObserver()

        self._cursor = 0
        self._last = self._clock()
        self._deltas: list[int] = []
        self._boundary_count = 0
        self._bytes_total = 0
        self._closed = False

    @property
    def deltas(self) -> tuple[int, ...]:
        """Accepted deltas in nanoseconds, in arrival order.

        Only final once ``completed`` is True; the driver waits on the
        completion signal before reading this.
        """
        return tuple(self._deltas)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def boundary_count(self) -> int:
        return self._boundary_count

    @property
    def bytes_total(self) -> int:
        return self._bytes_total

    @property
    def completed(self) -> bool:
        return self._signal.fired

    async def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, timing any packets they complete.

        Returns ``b""`` once the deadline has expired or the stream has
        ended. Body failures fire completion and raise StreamReadError,
        unless the deadline had already expired, in which case the read
        ends the stream like any other post-deadline read.
        """
        if self._signal.fired:
            return b""
        try:
            data = await self._read_until_deadline(size)
        except Exception as exc:
            if self._deadline.expired():
                self._complete("deadline")
                return b""
            self._complete("error")
            raise StreamReadError(f"response body read failed: {exc}") from exc

        if data is None:
            self._complete("deadline")
            return b""
        self._account(len(data))

        if self._deadline.expired():
            self._complete("deadline")
            return b""
        if not data:
            self._complete("eof")
            return b""
        return data

    async def close(self) -> None:
        """Fire completion if nothing else has, then release the body."""
        if self._closed:
            return
        self._closed = True
        self._complete("closed")
        await self._body.aclose()

    async def _read_until_deadline(self, size: int) -> bytes | None:
        """Read from the body, or return None if the deadline wins the race."""
        remaining = self._deadline.remaining()
        if remaining <= 0:
            return None
        try:
            return await asyncio.wait_for(self._body.read(size), timeout=remaining)
        except asyncio.TimeoutError:
            return None

    def _account(self, nbytes: int) -> None:
        pending = nbytes
        while self._cursor + pending >= self.packet_size:
            pending -= self.packet_size - self._cursor
            self._cursor = 0
            now = self._clock()
            delta = now - self._last
            self._last = now
            self._boundary_count += 1
            accepted = delta > self.noise_filter_ns
            if accepted:
                self._deltas.append(delta)
            self._observer.on_boundary(delta, accepted)
        self._cursor += pending
        self._bytes_total += nbytes
        self._observer.on_read(nbytes, self._cursor)

    def _complete(self, reason: str) -> None:
        if not self._signal.fire(reason):
            return
        self._observer.on_complete(reason)
        logger.info(
            "Ending statistical read (%s): %d packets, %d samples, %d bytes",
            reason,
            self._boundary_count,
            len(self._deltas),
            self._bytes_total,
        )


__all__ = ["PacketTimer", "ClockNs"]
