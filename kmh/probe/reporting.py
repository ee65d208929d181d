"""Human-readable report of run settings and results."""

from __future__ import annotations

from .result import ProbeResult
from .config import ProbeConfig


def _fmt_seconds(value: float) -> str:
    return f"{value:g}s"


def format_options(config: ProbeConfig) -> list[str]:
    return [
        f"Size of data periodically sent from server: {config.packet_size}",
        f"Local buffer size                         : {config.buffer_size}",
        f"Server URL                                : {config.url}",
        f"Allow self-signed certificates?           : {str(config.insecure).lower()}",
        f"Test timeout                              : {_fmt_seconds(config.timeout_s)}",
    ]


def format_result(result: ProbeResult) -> list[str]:
    lines = []
    if result.stream_error:
        lines.append(f"Stream ended early: {result.stream_error}")
    lines.append(f"KMH Implied Buffer Size: {result.implied_buffer_size:.2f} Kb")
    return lines


def print_options(config: ProbeConfig) -> None:
    for line in format_options(config):
        print(line)


def print_result(result: ProbeResult) -> None:
    for line in format_result(result):
        print(line)


__all__ = ["format_options", "format_result", "print_options", "print_result"]
