"""Configuration validation exceptions with structured error codes.

Raised before any network activity when a probe setting is out of range,
so a bad flag never produces a partial report.
"""

from .base import ProbeError


class ConfigurationError(ProbeError):
    """Invalid probe configuration.

    Attributes:
        error_code: Machine-parseable error identifier (e.g. ``invalid_packet_size``).
        message: Human-readable description.
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message


__all__ = ["ConfigurationError"]
