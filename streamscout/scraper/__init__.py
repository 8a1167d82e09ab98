"""Scraper package — two-hop link resolution."""

from streamscout.scraper.classifier import DEFAULT_TRUST_PATTERNS, LinkClassifier
from streamscout.scraper.errors import (
    MalformedInput,
    NetworkError,
    NoLinksFound,
    ResolveError,
    Stage,
    TokenNotFound,
    TransportError,
)
from streamscout.scraper.fetcher import fetch_page
from streamscout.scraper.models import Anchor, Link, ParsedPage, PipelineResult, TrustPattern
from streamscout.scraper.parser import parse_listing
from streamscout.scraper.pipeline import process_url, validate_url
from streamscout.scraper.ranker import rank_links
from streamscout.scraper.token import find_script_url, resolve_token_url

__all__ = [
    "process_url",
    "validate_url",
    "fetch_page",
    "resolve_token_url",
    "find_script_url",
    "parse_listing",
    "LinkClassifier",
    "DEFAULT_TRUST_PATTERNS",
    "rank_links",
    "Anchor",
    "Link",
    "ParsedPage",
    "PipelineResult",
    "TrustPattern",
    "Stage",
    "ResolveError",
    "MalformedInput",
    "NetworkError",
    "TransportError",
    "TokenNotFound",
    "NoLinksFound",
]
