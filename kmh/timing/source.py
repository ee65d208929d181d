"""Byte source contract consumed by the packet timer."""

from __future__ import annotations

from typing import Protocol


class ByteSource(Protocol):
    """Async body that yields at most ``size`` bytes per read, ``b""`` at end."""

    async def read(self, size: int) -> bytes: ...

    async def aclose(self) -> None: ...


__all__ = ["ByteSource"]
