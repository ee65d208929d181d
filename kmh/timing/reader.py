"""Bounded reads over a chunked async byte stream.

HTTP clients hand back response bodies as an async iterator of chunks
whose sizes the server and transport decide. ``BodyReader`` turns that
into ``read(size)`` calls returning at most ``size`` bytes, holding any
surplus for the next call, so the packet timer sees reads shaped by the
local buffer size.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import httpx


class BodyReader:
    """Read-at-most-N adapter over an async chunk iterator.

    ``read`` returns ``b""`` only at end of stream.
    """

    def __init__(
        self,
        chunks: AsyncIterator[bytes],
        *,
        close: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._chunks = chunks
        self._close = close
        self._pending = b""
        self._exhausted = False
        self._closed = False

    @classmethod
    def from_response(cls, response: httpx.Response) -> BodyReader:
        """Read the raw (undecoded) body of a streamed httpx response."""
        return cls(response.aiter_raw(), close=response.aclose)

    async def read(self, size: int) -> bytes:
        if size <= 0:
            raise ValueError(f"read size must be positive, got {size}")
        while not self._pending:
            if self._exhausted or self._closed:
                return b""
            try:
                self._pending = await anext(self._chunks)
            except StopAsyncIteration:
                self._exhausted = True
                return b""
        data, self._pending = self._pending[:size], self._pending[size:]
        return data

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = b""
        if hasattr(self._chunks, "aclose"):
            await self._chunks.aclose()
        if self._close is not None:
            await self._close()


__all__ = ["BodyReader"]
