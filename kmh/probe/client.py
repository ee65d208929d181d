"""HTTP client construction and request establishment."""

from __future__ import annotations

import logging

import httpx

from .config import ProbeConfig
from ..errors import RequestError

logger = logging.getLogger(__name__)


def build_client(
    config: ProbeConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the probe's client.

    Only connecting is time-limited here; once the body is streaming the
    probe deadline decides when reading stops, so reads, writes and pool
    waits carry no timeout of their own.
    """
    timeout = httpx.Timeout(None, connect=config.connect_timeout_s)
    return httpx.AsyncClient(
        verify=not config.insecure,
        timeout=timeout,
        transport=transport,
        follow_redirects=False,
    )


async def open_stream(client: httpx.AsyncClient, config: ProbeConfig) -> httpx.Response:
    """Send ``GET <url>?size=<packet_size>`` and return the unread streaming response.

    Raises:
        RequestError: If the request cannot be built or sent.
    """
    url = config.target_url
    try:
        request = client.build_request("GET", url, params={"size": config.packet_size})
        response = await client.send(request, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise RequestError(url, f"request to {url} failed: {exc}") from exc

    logger.info("Connected to %s (HTTP %d)", response.url, response.status_code)
    if not response.is_success:
        logger.warning("Periodic endpoint answered HTTP %d; timing the body anyway", response.status_code)
    return response


__all__ = ["build_client", "open_stream"]
