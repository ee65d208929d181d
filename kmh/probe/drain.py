"""Background drain loop for the packet timer."""

from __future__ import annotations

from ..timing.timer import PacketTimer


async def drain(timer: PacketTimer, buffer_size: int) -> int:
    """Read from ``timer`` until it reports end of stream.

    The timer is always closed on the way out, so its completion signal
    fires even if this task is cancelled or the read raises.

    Returns:
        Bytes handed back by the timer (bytes read after the deadline are
        accounted by the timer but not returned).
    """
    total = 0
    try:
        while True:
            data = await timer.read(buffer_size)
            if not data:
                break
            total += len(data)
    finally:
        await timer.close()
    return total


__all__ = ["drain"]
