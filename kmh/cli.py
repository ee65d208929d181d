"""
Command-line entry point for the KMH probe.

Opens one streaming GET against a periodic endpoint, times how often a
packet's worth of data arrives, and prints the implied buffer size once
the test timeout expires (or the server closes the stream).

Environment Variables:
- KMH_SIZE, KMH_BUFFER, KMH_URL, KMH_INSECURE, KMH_TIMEOUT_S,
  KMH_CONNECT_TIMEOUT_S, KMH_NOISE_FILTER_S: flag defaults
- KMH_LOG_LEVEL: log level for diagnostics (default INFO)

Exit codes: 0 success, 1 request failed, 2 invalid configuration,
3 no samples recorded.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from .errors import RequestError, NoSamplesError, ConfigurationError
from .logging import configure_logging
from .probe import ProbeConfig, run_probe, print_options, print_result
from .telemetry import build_observer
from .config import (
    EXIT_OK,
    DEFAULT_URL,
    EXIT_NO_SAMPLES,
    DEFAULT_INSECURE,
    DEFAULT_TIMEOUT_S,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_PACKET_SIZE,
    EXIT_INVALID_CONFIG,
    EXIT_REQUEST_FAILED,
    DEFAULT_NOISE_FILTER_S,
    DEFAULT_CONNECT_TIMEOUT_S,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kmh",
        description="Measure the implied buffer size of a periodic HTTP stream",
    )
    p.add_argument(
        "--size",
        type=int,
        default=DEFAULT_PACKET_SIZE,
        help="amount of data periodically sent from the server, in bytes",
    )
    p.add_argument(
        "--buffer",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help="local buffer size, in bytes",
    )
    p.add_argument(
        "--url",
        "--URL",
        dest="url",
        default=DEFAULT_URL,
        help="URL of a periodic endpoint (https:// is assumed without a scheme)",
    )
    p.add_argument(
        "--insecure",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_INSECURE,
        help="allow the server to use self-signed certificates",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help="how long the test lasts, in seconds",
    )
    p.add_argument(
        "--connect-timeout",
        dest="connect_timeout",
        type=float,
        default=DEFAULT_CONNECT_TIMEOUT_S,
        help="limit for establishing the connection, in seconds",
    )
    p.add_argument(
        "--noise-filter",
        dest="noise_filter",
        type=float,
        default=DEFAULT_NOISE_FILTER_S,
        help="inter-packet deltas must exceed this many seconds to count",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="trace every read and packet boundary",
    )
    return p


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Thin orchestrator: parse CLI args, run the probe, report."""
    args = parse_args(argv)
    configure_logging("DEBUG" if args.debug else None)

    try:
        config = ProbeConfig.from_args(args)
    except ConfigurationError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    print_options(config)

    try:
        result = asyncio.run(run_probe(config, observer=build_observer(debug=args.debug)))
    except RequestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_REQUEST_FAILED
    except NoSamplesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NO_SAMPLES

    print_result(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
