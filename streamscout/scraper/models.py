"""Data models for the link-resolution pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Literal, Pattern

TrustTarget = Literal["url", "host", "label"]


@dataclass(frozen=True)
class Anchor:
    """A raw ``a.btn`` candidate as it appears in the listing page."""

    href: str
    text: str


@dataclass(frozen=True)
class Link:
    """A classified download/stream link."""

    url: str
    label: str
    is_trusted: bool

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "label": self.label, "isTrusted": self.is_trusted}


@dataclass(frozen=True)
class TrustPattern:
    """A named matcher marking a mirror as trusted.

    ``target`` selects what the pattern is tested against: the full
    normalised URL, its host name, or the link label.
    """

    name: str
    pattern: Pattern[str]
    target: TrustTarget = "url"

    @classmethod
    def compile(cls, name: str, regex: str, target: TrustTarget = "url") -> TrustPattern:
        return cls(name=name, pattern=re.compile(regex, re.IGNORECASE), target=target)


@dataclass
class ParsedPage:
    """Structural view of the listing page."""

    title: str
    is_zip: bool
    anchors: List[Anchor] = field(default_factory=list)


@dataclass
class PipelineResult:
    """Ranked links plus listing-page metadata."""

    links: List[Link]
    page_title: str
    is_zip_file: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "links": [link.to_dict() for link in self.links],
            "pageTitle": self.page_title,
            "isZipFile": self.is_zip_file,
        }
