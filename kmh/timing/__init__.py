"""Packet timing primitives: deadline, completion signal, body reader, timer."""

from .deadline import Deadline
from .reader import BodyReader
from .signal import CompletionSignal
from .timer import PacketTimer
from .source import ByteSource

__all__ = [
    "BodyReader",
    "ByteSource",
    "CompletionSignal",
    "Deadline",
    "PacketTimer",
]
