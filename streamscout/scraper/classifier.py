"""Per-anchor classification: exclusion, URL rewrite, trust and labels."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Sequence
from urllib.parse import urljoin, urlsplit

from streamscout.branding import normalize_branding
from streamscout.scraper.models import Anchor, Link, TrustPattern

logger = logging.getLogger(__name__)

# Anchors advertising the messaging-app redirect are never offered.
EXCLUDED_TEXT = "telegram"

DEFAULT_TRUST_PATTERNS: Sequence[TrustPattern] = (
    TrustPattern.compile("Pub-Dev", r"pub-.*?\.dev"),
    TrustPattern.compile("FSL Server", r"fsl\.gigabytes\.click"),
)

# Storage hosts whose share pages (/u/<id>) have a direct-file endpoint.
STORAGE_DOMAINS: Sequence[str] = ("pixeldrain.com", "pixeldrain.dev")

_BRACKET_RE = re.compile(r"\[(.*?)\]", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def _hostname(url: str) -> str:
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


def rewrite_storage_url(url: str) -> str:
    """Rewrite ``https://pixeldrain.com/u/<id>`` to ``/api/file/<id>``.

    Any host equal to or ending in a :data:`STORAGE_DOMAINS` entry is
    rewritten onto that bare domain.  Other URLs are returned unchanged.
    """
    try:
        parts = urlsplit(url)
        hostname = (parts.hostname or "").lower()
    except ValueError:
        return url

    for domain in STORAGE_DOMAINS:
        if hostname != domain and not hostname.endswith("." + domain):
            continue
        if not parts.path.startswith("/u/"):
            return url
        file_id = parts.path[len("/u/"):].split("/", 1)[0]
        if not file_id:
            return url
        return f"https://{domain}/api/file/{file_id}"
    return url


def extract_label(text: str) -> str:
    """Return the bracketed ``[...]`` segment of *text*, or the whole text.

    Whitespace runs are collapsed either way.
    """
    match = _BRACKET_RE.search(text)
    if match and match.group(1):
        text = match.group(1).strip()
    return _WHITESPACE_RE.sub(" ", text)


class LinkClassifier:
    """Turns raw anchors into :class:`Link` objects.

    The trust table is injected at construction; the classifier holds no other
    state and may be shared across requests.
    """

    def __init__(
        self,
        trust_patterns: Sequence[TrustPattern] = DEFAULT_TRUST_PATTERNS,
        normalizer: Callable[[str], str] = normalize_branding,
    ) -> None:
        self._trust_patterns = tuple(trust_patterns)
        self._normalize = normalizer

    @property
    def trust_patterns(self) -> Sequence[TrustPattern]:
        return self._trust_patterns

    def match_trust(self, url: str, label: str) -> TrustPattern | None:
        """Return the first trust pattern matching the link, in declared order."""
        subjects = {"url": url, "host": _hostname(url), "label": label}
        for trust in self._trust_patterns:
            if trust.pattern.search(subjects[trust.target]):
                return trust
        return None

    def classify(self, anchor: Anchor, base_url: str | None = None) -> Link | None:
        """Classify one anchor; ``None`` means the anchor is dropped."""
        text = anchor.text.strip()
        if EXCLUDED_TEXT in text.lower():
            logger.debug("Skipping messaging-app anchor %r", text)
            return None
        if not anchor.href:
            logger.debug("Skipping anchor %r without href", text)
            return None

        url = urljoin(base_url, anchor.href) if base_url else anchor.href
        url = rewrite_storage_url(url)
        label = self._normalize(extract_label(text))
        trust = self.match_trust(url, label)
        if trust is not None:
            logger.debug("%s matched trust pattern %r", url, trust.name)

        return Link(url=url, label=label, is_trusted=trust is not None)

    def classify_all(self, anchors: Iterable[Anchor], base_url: str | None = None) -> List[Link]:
        links: List[Link] = []
        for anchor in anchors:
            link = self.classify(anchor, base_url)
            if link is not None:
                links.append(link)
        return links
