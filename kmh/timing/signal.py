"""One-shot completion signal shared by the drain task and the driver."""

from __future__ import annotations

import asyncio


class CompletionSignal:
    """Fires at most once; any number of waiters may await it.

    ``fire()`` reports whether this call was the one that fired, so the
    at-most-once contract is enforced here rather than by callers.
    """

    __slots__ = ("_event", "_reason")

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None

    @property
    def fired(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Why the signal fired (``"deadline"``, ``"eof"``, ...), or None."""
        return self._reason

    def fire(self, reason: str = "done") -> bool:
        if self._event.is_set():
            return False
        self._reason = reason
        self._event.set()
        return True

    async def wait(self) -> str | None:
        """Block until fired and return the reason."""
        await self._event.wait()
        return self._reason


__all__ = ["CompletionSignal"]
