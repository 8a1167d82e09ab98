"""Locate the tokenized listing URL inside the gateway page.

Two sources are consulted, first success wins:

1. An inline script assignment of the form::

       var url = '<target>';

   matched by :func:`find_script_url`.  Grammar: the keyword ``var``, one or
   more whitespace characters, the identifier ``url``, optional whitespace,
   ``=``, optional whitespace, then a single-quoted literal with no embedded
   single quote.  The literal is returned verbatim.
2. The first ``<a>`` whose ``href`` contains ``token=``.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from streamscout.scraper.errors import Stage, TokenNotFound

_SCRIPT_URL_RE = re.compile(r"var\s+url\s*=\s*'(.*?)'")

TOKEN_MARKER = "token="


def find_script_url(html: str) -> str | None:
    """Return the literal assigned to ``var url`` in *html*, if any."""
    match = _SCRIPT_URL_RE.search(html)
    if match and match.group(1):
        return match.group(1)
    return None


def _find_token_href(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    anchor = soup.select_one(f'a[href*="{TOKEN_MARKER}"]')
    if anchor is None:
        return None
    return anchor.get("href") or None


def _absolutise(href: str, origin_url: str) -> str:
    origin = urlsplit(origin_url)
    if href.startswith("//"):
        return f"{origin.scheme}:{href}"
    if href.startswith("/"):
        host = origin.hostname or ""
        if ":" in host:
            host = f"[{host}]"
        if origin.port is not None:
            host = f"{host}:{origin.port}"
        return f"{origin.scheme}://{host}{href}"
    return href


def resolve_token_url(html: str, origin_url: str) -> str:
    """Return the listing-page URL embedded in the gateway *html*.

    Raises:
        TokenNotFound: Neither the script literal nor a token link exists.
    """
    script_url = find_script_url(html)
    if script_url:
        return script_url

    href = _find_token_href(html)
    if href:
        return _absolutise(href, origin_url)

    raise TokenNotFound(stage=Stage.RESOLVING_TOKEN)
