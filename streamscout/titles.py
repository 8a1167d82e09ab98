"""Display helpers for release titles scraped from listing pages."""

from __future__ import annotations

import re
from typing import Optional, Tuple

# Markers that usually start the technical part of a release title.
_INDICATORS = (
    "Hindi", "English", "Tamil", "Telugu", "Malayalam", "Kannada",
    "Korean", "Japanese", "Chinese", "Dual Audio", "Multi Audio",
    "WEB-DL", "WEBRip", "HDRip", "BluRay", "DVDRip",
    "Prime Video", "Netflix", "Hotstar",
    "480p", "720p", "1080p", "2160p", "4K",
)

_LANGUAGES = (
    "English", "Hindi", "Tamil", "Telugu", "Kannada", "Malayalam",
    "Bengali", "Marathi", "Punjabi", "Gujarati", "Odia",
    "Assamese", "Urdu", "Bhojpuri",
)
_LANGUAGE_RES = tuple(
    (lang, re.compile(rf"\b{lang}\b", re.IGNORECASE)) for lang in _LANGUAGES
)

_SEASON_RE = re.compile(r"^(.+?(?:Season\s+\d+|S\d+(?:E\d+)?))(.+)$", re.IGNORECASE)


def clean_title_for_home(title: str) -> str:
    """Everything before the first ``(``, e.g. ``"Following (2024) ..."`` → ``"Following"``."""
    if not title:
        return ""
    head = title.split("(", 1)[0].strip()
    return head or title.strip()


def split_title(title: str) -> Tuple[str, str]:
    """Split a release title into ``(title, subtitle)``.

    The split happens at the earliest language/format indicator, or failing
    that right after a ``Season N`` / ``SxxEyy`` marker.
    """
    if not title:
        return "", ""

    positions = [title.find(ind) for ind in _INDICATORS]
    positions = [pos for pos in positions if pos != -1]
    if positions and min(positions) > 0:
        split_at = min(positions)
        return title[:split_at].strip(), title[split_at:].strip()

    match = _SEASON_RE.match(title)
    if match and match.group(2).strip():
        return match.group(1).strip(), match.group(2).strip()

    return title.strip(), ""


def truncate_subtitle(subtitle: str, max_length: int = 80) -> str:
    if not subtitle or len(subtitle) <= max_length:
        return subtitle
    return subtitle[:max_length].strip() + "..."


def language_badge(title: str) -> Optional[str]:
    """Return the single language named in *title*, ``"Multi Audio"`` for
    several, or ``None``."""
    if not title:
        return None
    found = [lang for lang, pattern in _LANGUAGE_RES if pattern.search(title)]
    if len(found) > 1:
        return "Multi Audio"
    if found:
        return found[0]
    return None
