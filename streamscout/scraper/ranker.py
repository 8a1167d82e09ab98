"""Trusted-first ordering of classified links."""

from __future__ import annotations

from typing import Iterable, List

from streamscout.scraper.models import Link


def rank_links(links: Iterable[Link]) -> List[Link]:
    """Stable partition: trusted links first, each group in input order.

    Duplicates are kept; nothing is sorted.
    """
    trusted: List[Link] = []
    others: List[Link] = []
    for link in links:
        (trusted if link.is_trusted else others).append(link)
    return trusted + others
