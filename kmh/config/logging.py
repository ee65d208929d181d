"""Application logging configuration values."""

import os


KMH_LOG_LEVEL = (os.getenv("KMH_LOG_LEVEL", "INFO") or "INFO").upper()
KMH_LOG_FORMAT = os.getenv(
    "KMH_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)
KMH_LOG_DATEFMT = os.getenv("KMH_LOG_DATEFMT", "%Y-%m-%d %H:%M:%S")


__all__ = [
    "KMH_LOG_LEVEL",
    "KMH_LOG_FORMAT",
    "KMH_LOG_DATEFMT",
]
