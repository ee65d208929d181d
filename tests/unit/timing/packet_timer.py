"""Unit tests for packet boundary accounting and timer completion."""

from __future__ import annotations

import asyncio
import time

import pytest

from kmh.errors import StreamReadError, ConfigurationError
from kmh.timing import Deadline, PacketTimer, CompletionSignal
from tests.helpers import FakeClock, ScriptedBody, RecordingObserver


def _timer(
    body: ScriptedBody,
    *,
    packet_size: int = 512,
    clock: FakeClock | None = None,
    deadline: Deadline | None = None,
    signal: CompletionSignal | None = None,
    noise_filter_ns: int = 0,
    observer: RecordingObserver | None = None,
) -> PacketTimer:
    clock = clock or FakeClock()
    return PacketTimer(
        deadline or Deadline(60.0, now_fn=clock.seconds),
        signal or CompletionSignal(),
        packet_size,
        body,
        noise_filter_ns=noise_filter_ns,
        clock=clock.ns,
        observer=observer,
    )


async def _read_all(timer: PacketTimer, size: int = 1 << 20) -> list[bytes]:
    out = []
    while True:
        data = await timer.read(size)
        if not data:
            return out
        out.append(data)


@pytest.mark.parametrize(
    ("packet_size", "chunk_sizes"),
    [
        (512, [512, 512, 512]),
        (512, [100, 412, 1024, 1, 511]),
        (512, [1536]),
        (7, [1, 1, 1, 1, 1, 1, 1, 14]),
        (1, [3, 2, 5]),
        (1000, [999, 2, 999]),
    ],
)
def test_chunks_summing_to_whole_packets_produce_one_boundary_per_packet(
    packet_size: int, chunk_sizes: list[int]
) -> None:
    async def _run() -> None:
        body = ScriptedBody(b"x" * n for n in chunk_sizes)
        timer = _timer(body, packet_size=packet_size)
        await _read_all(timer)
        assert timer.boundary_count == sum(chunk_sizes) // packet_size
        assert timer.cursor == 0
        assert timer.bytes_total == sum(chunk_sizes)

    asyncio.run(_run())


def test_cursor_stays_below_packet_size_after_every_read() -> None:
    async def _run() -> None:
        chunk_sizes = [1, 700, 3, 511, 2048, 17, 0]
        body = ScriptedBody(b"x" * n for n in chunk_sizes if n)
        timer = _timer(body, packet_size=512)
        consumed = 0
        while True:
            data = await timer.read(4096)
            consumed += len(data)
            assert 0 <= timer.cursor < 512
            assert timer.cursor == consumed % 512
            if not data:
                break

    asyncio.run(_run())


def test_single_read_spanning_several_packets_keeps_surplus() -> None:
    async def _run() -> None:
        body = ScriptedBody([b"x" * (3 * 512 + 5)])
        timer = _timer(body)
        await timer.read(4096)
        assert timer.boundary_count == 3
        assert timer.cursor == 5

    asyncio.run(_run())


def test_read_exactly_finishing_a_packet_counts_as_boundary() -> None:
    async def _run() -> None:
        body = ScriptedBody([b"x" * 300, b"x" * 212])
        timer = _timer(body)
        await timer.read(4096)
        assert timer.boundary_count == 0
        assert timer.cursor == 300
        await timer.read(4096)
        assert timer.boundary_count == 1
        assert timer.cursor == 0

    asyncio.run(_run())


def test_noise_filter_keeps_only_deltas_strictly_above_threshold() -> None:
    async def _run() -> None:
        clock = FakeClock()
        one_second = 1_000_000_000
        body = ScriptedBody(
            [
                lambda: clock.advance_ns(one_second),
                b"x" * 10,
                lambda: clock.advance_ns(one_second + 1),
                b"x" * 10,
                lambda: clock.advance_ns(999_000_000),
                b"x" * 10,
                lambda: clock.advance_ns(2 * one_second),
                b"x" * 10,
            ]
        )
        observer = RecordingObserver()
        timer = _timer(body, packet_size=10, clock=clock, noise_filter_ns=one_second, observer=observer)
        await _read_all(timer)
        assert timer.deltas == (one_second + 1, 2 * one_second)
        assert timer.boundary_count == 4
        assert [accepted for _, accepted in observer.boundaries] == [False, True, False, True]

    asyncio.run(_run())


def test_default_noise_filter_is_one_second() -> None:
    timer = PacketTimer(Deadline(1.0), CompletionSignal(), 512, ScriptedBody([]))
    assert timer.noise_filter_ns == 1_000_000_000


def test_deltas_from_one_read_measure_from_previous_boundary() -> None:
    async def _run() -> None:
        clock = FakeClock()
        body = ScriptedBody([lambda: clock.advance(3.0), b"x" * 1024])
        timer = _timer(body, clock=clock, noise_filter_ns=0)
        await timer.read(4096)
        # Second boundary in the same read sees no elapsed time and is filtered
        assert timer.deltas == (3_000_000_000,)
        assert timer.boundary_count == 2

    asyncio.run(_run())


@pytest.mark.parametrize("packet_size", [0, -1, True, 1.5])
def test_invalid_packet_size_is_rejected(packet_size) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        PacketTimer(Deadline(1.0), CompletionSignal(), packet_size, ScriptedBody([]))
    assert exc_info.value.error_code == "invalid_packet_size"


def test_negative_noise_filter_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        PacketTimer(Deadline(1.0), CompletionSignal(), 512, ScriptedBody([]), noise_filter_ns=-1)
    assert exc_info.value.error_code == "invalid_noise_filter"


def test_natural_end_of_stream_fires_completion() -> None:
    async def _run() -> None:
        signal = CompletionSignal()
        body = ScriptedBody([b"x" * 100])
        timer = _timer(body, signal=signal)
        assert await timer.read(4096) == b"x" * 100
        assert not signal.fired
        assert await timer.read(4096) == b""
        assert signal.fired
        assert signal.reason == "eof"
        assert timer.cursor == 100

    asyncio.run(_run())


def test_deadline_expiry_forces_end_of_stream_after_accounting() -> None:
    async def _run() -> None:
        clock = FakeClock()
        signal = CompletionSignal()
        body = ScriptedBody([b"x" * 512, lambda: clock.advance(6.0), b"x" * 512, b"x" * 512])
        timer = _timer(body, clock=clock, signal=signal, deadline=Deadline(5.0, now_fn=clock.seconds))
        assert await timer.read(4096) == b"x" * 512
        assert await timer.read(4096) == b""
        assert signal.reason == "deadline"
        # The bytes of the expiring read are still accounted
        assert timer.boundary_count == 2
        assert timer.deltas == (6_000_000_000,)

    asyncio.run(_run())


def test_reads_after_completion_do_not_touch_body_or_deltas() -> None:
    async def _run() -> None:
        clock = FakeClock()
        body = ScriptedBody([lambda: clock.advance(6.0), b"x" * 512, b"x" * 512])
        timer = _timer(body, clock=clock, deadline=Deadline(5.0, now_fn=clock.seconds))
        assert await timer.read(4096) == b""
        reads = body.reads
        deltas = timer.deltas
        for _ in range(3):
            assert await timer.read(4096) == b""
        assert body.reads == reads
        assert timer.deltas == deltas

    asyncio.run(_run())


def test_completion_fires_exactly_once() -> None:
    async def _run() -> None:
        clock = FakeClock()
        observer = RecordingObserver()
        signal = CompletionSignal()
        body = ScriptedBody([lambda: clock.advance(10.0), b"x" * 2048])
        timer = _timer(
            body,
            clock=clock,
            signal=signal,
            observer=observer,
            deadline=Deadline(5.0, now_fn=clock.seconds),
        )
        await _read_all(timer)
        await timer.read(4096)
        await timer.close()
        assert observer.completions == ["deadline"]
        assert signal.fire("again") is False

    asyncio.run(_run())


def test_body_error_raises_stream_read_error_and_completes() -> None:
    async def _run() -> None:
        signal = CompletionSignal()
        body = ScriptedBody([b"x" * 1024, OSError("connection reset")])
        timer = _timer(body, signal=signal)
        await timer.read(4096)
        with pytest.raises(StreamReadError) as exc_info:
            await timer.read(4096)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert signal.reason == "error"
        assert timer.boundary_count == 2

    asyncio.run(_run())


def test_body_error_after_deadline_is_reported_as_end_of_stream() -> None:
    async def _run() -> None:
        clock = FakeClock()
        signal = CompletionSignal()
        body = ScriptedBody([lambda: clock.advance(6.0), OSError("late failure")])
        timer = _timer(body, clock=clock, signal=signal, deadline=Deadline(5.0, now_fn=clock.seconds))
        assert await timer.read(4096) == b""
        assert signal.reason == "deadline"

    asyncio.run(_run())


def test_stalled_read_is_cut_off_at_the_deadline() -> None:
    async def _run() -> None:
        signal = CompletionSignal()
        body = ScriptedBody([], hang=True)
        timer = PacketTimer(Deadline(0.05), signal, 512, body)
        started = time.monotonic()
        assert await timer.read(4096) == b""
        assert time.monotonic() - started < 2.0
        assert signal.reason == "deadline"
        assert body.cancelled

    asyncio.run(_run())


def test_close_fires_completion_and_closes_body_once() -> None:
    async def _run() -> None:
        signal = CompletionSignal()
        body = ScriptedBody([b"x" * 10])
        timer = _timer(body, signal=signal)
        await timer.close()
        await timer.close()
        assert signal.reason == "closed"
        assert body.closed
        assert await timer.read(4096) == b""

    asyncio.run(_run())


def test_observer_sees_reads_with_cursor() -> None:
    async def _run() -> None:
        observer = RecordingObserver()
        body = ScriptedBody([b"x" * 300, b"x" * 300])
        timer = _timer(body, observer=observer)
        await _read_all(timer)
        assert observer.reads == [(300, 300), (300, 88), (0, 88)]
        assert len(observer.boundaries) == 1

    asyncio.run(_run())
