"""Shared fakes for probe unit tests.

This package provides deterministic stand-ins for the clock, the response
body and the observer so timing behavior can be asserted exactly.
"""

from .clock import FakeClock
from .streams import ScriptedBody, paced_chunks
from .observers import RecordingObserver

__all__ = [
    "FakeClock",
    "RecordingObserver",
    "ScriptedBody",
    "paced_chunks",
]
