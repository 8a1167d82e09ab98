"""Listing-page parser: title, zip flag and button-styled anchors."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from streamscout.scraper.models import Anchor, ParsedPage

BUTTON_SELECTOR = "a.btn"


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _extract_title(soup: BeautifulSoup) -> str:
    """Return the ``<title>`` text, whitespace-collapsed, or empty string."""
    if soup.title is None:
        return ""
    return _collapse(soup.title.get_text())


def _extract_anchors(soup: BeautifulSoup) -> List[Anchor]:
    anchors: List[Anchor] = []
    for element in soup.select(BUTTON_SELECTOR):
        href = element.get("href") or ""
        anchors.append(Anchor(href=href.strip(), text=element.get_text().strip()))
    return anchors


def parse_listing(html: str) -> ParsedPage:
    """Parse the listing page *html* into a :class:`ParsedPage`.

    Anchors keep document order; nothing is filtered here.
    """
    soup = BeautifulSoup(html, "html.parser")
    title = _extract_title(soup)
    return ParsedPage(
        title=title,
        is_zip=title.lower().endswith(".zip"),
        anchors=_extract_anchors(soup),
    )
