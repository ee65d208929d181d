"""Exception classification helpers for metrics labels and exit codes."""

from __future__ import annotations

from .request import RequestError
from .stream import StreamReadError
from .samples import NoSamplesError
from .configuration import ConfigurationError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ConfigurationError, "configuration"),
    (RequestError, "request"),
    (StreamReadError, "stream_read"),
    (NoSamplesError, "no_samples"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a metric-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
