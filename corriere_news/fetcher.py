from __future__ import annotations

from typing import Mapping, Optional

import httpx
import structlog

from .exceptions import UpstreamFetchError

logger = structlog.get_logger(__name__)

# Browser-like headers so the homepage is served in full
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "it-IT,it;q=0.9,en;q=0.8",
}


async def fetch_html(
    url: str,
    *,
    timeout: float = 10.0,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Fetch a page and return its decoded body.

    Raises UpstreamFetchError when the request fails ("Failed to fetch URL") or when the
    connection breaks while the body is being read ("Failed to read response text").
    Non-2xx responses are not errors here; their body is returned like any other page.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport) as client:
            async with client.stream("GET", url, headers=dict(headers or DEFAULT_HEADERS)) as response:
                try:
                    await response.aread()
                except httpx.HTTPError as e:
                    logger.warning("read_failed", url=url, error=str(e))
                    raise UpstreamFetchError(f"Failed to read response text: {e}") from e
    except httpx.HTTPError as e:
        logger.warning("fetch_failed", url=url, error=str(e))
        raise UpstreamFetchError(f"Failed to fetch URL: {e}") from e

    if response.is_error:
        logger.warning("fetch_error_status", url=url, status=response.status_code)
    return response.text
