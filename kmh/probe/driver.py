"""Probe driver: one end-to-end measurement run.

Flow:
    1. Open ``GET <url>?size=<packet_size>`` as a streaming response.
    2. Start the deadline once headers arrive and wrap the body in a
       PacketTimer bound to it and a fresh CompletionSignal.
    3. Drain the timer on a background task.
    4. Wait for the completion signal, then join the drain task.
    5. Average the accepted deltas and scale by the packet size.

The drain task is the only writer of timer state; the driver reads the
deltas only after the completion signal has fired.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging

import httpx

from .drain import drain
from .result import ProbeResult
from .client import build_client, open_stream
from ..stats import average
from ..timing import Deadline, BodyReader, PacketTimer, CompletionSignal
from ..errors import RequestError, NoSamplesError, StreamReadError, classify_error
from ..timing.timer import ClockNs
from ..timing.deadline import TimeFn
from .config import ProbeConfig
from ..config.defaults import NS_PER_SECOND
from ..telemetry.observers import ProbeObserver

logger = logging.getLogger(__name__)


async def run_probe(
    config: ProbeConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    observer: ProbeObserver | None = None,
    clock: ClockNs | None = None,
    now_fn: TimeFn | None = None,
) -> ProbeResult:
    """Run one probe and return its result.

    Args:
        config: Validated probe settings.
        transport: httpx transport override (tests use ``httpx.MockTransport``).
        observer: Receives read, boundary and completion events.
        clock: Nanosecond clock for packet deltas.
        now_fn: Seconds clock for the deadline.

    Raises:
        RequestError: The request could not be established.
        NoSamplesError: The run ended without an accepted delta.
    """
    observer = observer or ProbeObserver()
    async with build_client(config, transport=transport) as client:
        try:
            response = await open_stream(client, config)
        except RequestError as exc:
            observer.on_error(classify_error(exc))
            raise

        try:
            signal = CompletionSignal()
            timer = PacketTimer(
                Deadline(config.timeout_s, now_fn=now_fn),
                signal,
                config.packet_size,
                BodyReader.from_response(response),
                noise_filter_ns=config.noise_filter_ns,
                clock=clock,
                observer=observer,
            )
            reason, stream_error = await _drain_until_complete(timer, signal, config, observer)
        finally:
            await response.aclose()

    return _build_result(config, timer, reason, stream_error, observer)


async def _drain_until_complete(
    timer: PacketTimer,
    signal: CompletionSignal,
    config: ProbeConfig,
    observer: ProbeObserver,
) -> tuple[str | None, str | None]:
    drain_task = asyncio.create_task(drain(timer, config.buffer_size), name="kmh-drain")
    try:
        reason = await signal.wait()
        stream_error = await _join_drain(drain_task, timer, observer)
    finally:
        if not drain_task.done():
            drain_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await drain_task
    return reason, stream_error


async def _join_drain(
    drain_task: asyncio.Task[int],
    timer: PacketTimer,
    observer: ProbeObserver,
) -> str | None:
    try:
        drained = await drain_task
    except StreamReadError as exc:
        logger.warning(
            "Response stream failed after %d packets (%d samples): %s",
            timer.boundary_count,
            len(timer.deltas),
            exc,
        )
        observer.on_error(classify_error(exc))
        return str(exc)
    logger.debug("Drain finished after %d bytes", drained)
    return None


def _build_result(
    config: ProbeConfig,
    timer: PacketTimer,
    reason: str | None,
    stream_error: str | None,
    observer: ProbeObserver,
) -> ProbeResult:
    deltas = timer.deltas
    if not deltas:
        exc = NoSamplesError(
            f"no inter-packet deltas above {config.noise_filter_s:g}s were recorded "
            f"({timer.boundary_count} packets, {timer.bytes_total} bytes received)",
            boundary_count=timer.boundary_count,
            bytes_total=timer.bytes_total,
        )
        observer.on_error(classify_error(exc))
        raise exc

    average_delta_s = average(deltas) / NS_PER_SECOND
    implied_buffer_size = average_delta_s * config.packet_size
    logger.info(
        "Probe finished (%s): %d samples, mean delta %.3fs",
        reason,
        len(deltas),
        average_delta_s,
    )
    return ProbeResult(
        config=config,
        deltas_ns=deltas,
        average_delta_s=average_delta_s,
        implied_buffer_size=implied_buffer_size,
        boundary_count=timer.boundary_count,
        bytes_total=timer.bytes_total,
        completion_reason=reason,
        stream_error=stream_error,
    )


__all__ = ["run_probe"]
