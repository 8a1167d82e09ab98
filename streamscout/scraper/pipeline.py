"""Two-hop link resolution: gateway page → listing page → ranked links.

Stages run strictly in order::

    START → FETCHING_GATEWAY → RESOLVING_TOKEN → FETCHING_LISTING
          → PARSING → CLASSIFYING → RANKING → DONE

The first failure raises a :class:`ResolveError` subclass tagged with the
stage it happened in; nothing partial is ever returned.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit

import httpx

from streamscout.scraper.classifier import LinkClassifier
from streamscout.scraper.errors import MalformedInput, NoLinksFound, ResolveError, Stage
from streamscout.scraper.fetcher import fetch_page, new_client
from streamscout.scraper.models import PipelineResult
from streamscout.scraper.parser import parse_listing
from streamscout.scraper.ranker import rank_links
from streamscout.scraper.token import resolve_token_url

logger = logging.getLogger(__name__)


def validate_url(url: Any) -> str:
    """Return *url* stripped if it is an absolute http(s) URL.

    Raises:
        MalformedInput: *url* is missing, not a string, or not absolute.
    """
    if not url or not isinstance(url, str):
        raise MalformedInput("URL is required")
    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
    except ValueError as exc:
        raise MalformedInput() from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise MalformedInput()
    return candidate


async def _run(url: str, client: httpx.AsyncClient, classifier: LinkClassifier) -> PipelineResult:
    stage = Stage.FETCHING_GATEWAY
    logger.debug("[%s] %s", stage.value, url)
    gateway_html = await fetch_page(url, client, stage=stage)

    stage = Stage.RESOLVING_TOKEN
    listing_url = resolve_token_url(gateway_html, url)
    logger.debug("[%s] listing page at %s", stage.value, listing_url)

    stage = Stage.FETCHING_LISTING
    listing_html = await fetch_page(listing_url, client, stage=stage)

    stage = Stage.PARSING
    page = parse_listing(listing_html)
    logger.debug("[%s] %d candidate anchor(s), title=%r", stage.value, len(page.anchors), page.title)

    stage = Stage.CLASSIFYING
    links = classifier.classify_all(page.anchors, base_url=listing_url)
    if not links:
        raise NoLinksFound(stage=stage)

    stage = Stage.RANKING
    ranked = rank_links(links)
    logger.info(
        "Resolved %d link(s) (%d trusted) from %s",
        len(ranked),
        sum(1 for link in ranked if link.is_trusted),
        url,
    )
    return PipelineResult(links=ranked, page_title=page.title, is_zip_file=page.is_zip)


async def process_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    classifier: LinkClassifier | None = None,
) -> PipelineResult:
    """Resolve the gateway *url* into a ranked :class:`PipelineResult`.

    Args:
        url: Gateway page URL; validated with :func:`validate_url` first.
        client: Optional shared ``AsyncClient``.  When omitted a client is
            opened for this call only and closed on exit.
        classifier: Optional classifier carrying a custom trust table.

    Raises:
        ResolveError: Any failure; see :mod:`streamscout.scraper.errors`.
    """
    url = validate_url(url)
    classifier = classifier or LinkClassifier()

    try:
        if client is None:
            async with new_client() as own_client:
                return await _run(url, own_client, classifier)
        return await _run(url, client, classifier)
    except ResolveError as exc:
        logger.warning("Resolution of %s failed at %s: %s", url, exc.stage.value, exc)
        raise
