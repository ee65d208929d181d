"""Logging setup for the probe."""

from __future__ import annotations

import logging
import contextlib

from .config.logging import KMH_LOG_LEVEL, KMH_LOG_FORMAT, KMH_LOG_DATEFMT


def configure_logging(level: str | None = None) -> None:
    """Initialize root logging configuration once per process.

    Args:
        level: Overrides ``KMH_LOG_LEVEL`` for the ``kmh`` logger (e.g. ``"DEBUG"``).
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=KMH_LOG_LEVEL, format=KMH_LOG_FORMAT, datefmt=KMH_LOG_DATEFMT)
    else:
        root_logger.setLevel(KMH_LOG_LEVEL)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(logging.NOTSET)
                handler.setFormatter(logging.Formatter(KMH_LOG_FORMAT, datefmt=KMH_LOG_DATEFMT))

    logging.getLogger("kmh").setLevel((level or KMH_LOG_LEVEL).upper())
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
