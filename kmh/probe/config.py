"""Immutable probe configuration.

A ``ProbeConfig`` is built once at startup (usually from parsed CLI
arguments) and passed into the driver; nothing reads settings from
process-wide mutable state after that.
"""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any

from ..errors import ConfigurationError
from ..config.defaults import (
    DEFAULT_URL,
    NS_PER_SECOND,
    DEFAULT_SCHEME,
    DEFAULT_INSECURE,
    DEFAULT_TIMEOUT_S,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_PACKET_SIZE,
    DEFAULT_NOISE_FILTER_S,
    DEFAULT_CONNECT_TIMEOUT_S,
)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    """Settings for one measurement run.

    Attributes:
        packet_size: Bytes per logical packet; also sent as ``?size=``.
        buffer_size: Maximum bytes requested per body read.
        url: Periodic endpoint, with or without a scheme.
        insecure: Skip TLS certificate verification.
        timeout_s: Test duration after the response headers arrive.
        connect_timeout_s: Limit for establishing the connection.
        noise_filter_s: Deltas must exceed this to be recorded.
    """

    packet_size: int = DEFAULT_PACKET_SIZE
    buffer_size: int = DEFAULT_BUFFER_SIZE
    url: str = DEFAULT_URL
    insecure: bool = DEFAULT_INSECURE
    timeout_s: float = DEFAULT_TIMEOUT_S
    connect_timeout_s: float = DEFAULT_CONNECT_TIMEOUT_S
    noise_filter_s: float = DEFAULT_NOISE_FILTER_S

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError for any out-of-range setting."""
        if not _is_positive_int(self.packet_size):
            raise ConfigurationError(
                "invalid_packet_size",
                f"packet size must be a positive integer, got {self.packet_size!r}",
            )
        if not _is_positive_int(self.buffer_size):
            raise ConfigurationError(
                "invalid_buffer_size",
                f"buffer size must be a positive integer, got {self.buffer_size!r}",
            )
        if not self.url or not self.url.strip():
            raise ConfigurationError("invalid_url", "URL must not be empty")
        if self.timeout_s <= 0:
            raise ConfigurationError(
                "invalid_timeout",
                f"timeout must be positive, got {self.timeout_s!r}",
            )
        if self.connect_timeout_s <= 0:
            raise ConfigurationError(
                "invalid_connect_timeout",
                f"connect timeout must be positive, got {self.connect_timeout_s!r}",
            )
        if self.noise_filter_s < 0:
            raise ConfigurationError(
                "invalid_noise_filter",
                f"noise filter must not be negative, got {self.noise_filter_s!r}",
            )

    @property
    def target_url(self) -> str:
        """Endpoint URL with a scheme; ``https`` is assumed when none is given."""
        url = self.url.strip()
        if "://" in url:
            return url
        return f"{DEFAULT_SCHEME}://{url}"

    @property
    def noise_filter_ns(self) -> int:
        return int(round(self.noise_filter_s * NS_PER_SECOND))

    @classmethod
    def from_args(cls, args: Mapping[str, Any] | Namespace) -> ProbeConfig:
        """Build a config from parsed CLI arguments (or an equivalent mapping)."""
        if not isinstance(args, Mapping):
            args = vars(args)
        return cls(
            packet_size=int(args.get("size", DEFAULT_PACKET_SIZE)),
            buffer_size=int(args.get("buffer", DEFAULT_BUFFER_SIZE)),
            url=str(args.get("url", DEFAULT_URL)),
            insecure=bool(args.get("insecure", DEFAULT_INSECURE)),
            timeout_s=float(args.get("timeout", DEFAULT_TIMEOUT_S)),
            connect_timeout_s=float(args.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT_S)),
            noise_filter_s=float(args.get("noise_filter", DEFAULT_NOISE_FILTER_S)),
        )


__all__ = ["ProbeConfig"]
