"""Async HTTP fetcher used for both hops of the pipeline."""

from __future__ import annotations

import logging

import httpx

from streamscout.config import settings
from streamscout.scraper.errors import NetworkError, Stage, TransportError

logger = logging.getLogger(__name__)

# Fixed browser identification; target pages refuse obvious bot agents.
_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/91.0.4472.124 Safari/537.36"
    )
}

_FAILURE_PREFIX = {
    Stage.FETCHING_GATEWAY: "Failed to fetch initial URL",
    Stage.FETCHING_LISTING: "Failed to fetch download page",
}


def new_client() -> httpx.AsyncClient:
    """Return an ``AsyncClient`` configured the way every fetch expects."""
    return httpx.AsyncClient(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    return await client.get(url, headers=_DEFAULT_HEADERS, follow_redirects=True)


async def fetch_page(
    url: str,
    client: httpx.AsyncClient | None = None,
    *,
    stage: Stage = Stage.FETCHING_GATEWAY,
) -> str:
    """GET *url* and return the response body.

    A short-lived client is opened when *client* is ``None``.

    Raises:
        NetworkError: The server answered with a status outside 2xx.
        TransportError: The request did not complete.
    """
    logger.debug("GET %s", url)
    try:
        if client is None:
            async with new_client() as own_client:
                response = await _get(own_client, url)
        else:
            response = await _get(client, url)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(f"Could not reach {url}: {exc}", stage=stage) from exc

    if not response.is_success:
        prefix = _FAILURE_PREFIX.get(stage, "Request failed")
        raise NetworkError(
            response.status_code,
            f"{prefix} (status: {response.status_code})",
            stage=stage,
        )

    return response.text
