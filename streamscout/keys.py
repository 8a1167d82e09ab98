"""Opaque deep-link keys.

Route parameters are packed into a single URL-safe token so player and
download pages can be linked without exposing the source URL in the query
string.  Keys are base64url (no padding) over a compact JSON object holding
only the fields that were set.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

DRIVE_FIELDS = ("link", "driveid", "tmdbid", "season", "server")
CLOUD_FIELDS = ("id", "title", "poster", "url")

_MOVIE_SEPARATOR = "|||"


def _b64encode(raw: str) -> str:
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def _b64decode(key: str) -> str:
    padded = key + "=" * (-len(key) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


def encode_params(params: Mapping[str, Optional[str]]) -> str:
    """Pack the non-``None`` entries of *params* into a key."""
    clean = {name: value for name, value in params.items() if value is not None}
    return _b64encode(json.dumps(clean, separators=(",", ":"), ensure_ascii=False))


def decode_params(key: str, fields: Iterable[str] | None = None) -> dict[str, str] | None:
    """Unpack a key produced by :func:`encode_params`.

    Returns ``None`` when *key* is malformed, or when *fields* is given and
    the key carries a field outside it.
    """
    try:
        data = json.loads(_b64decode(key))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        logger.debug("Rejecting malformed key %r: %s", key, exc)
        return None

    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        return None
    if fields is not None and not set(data) <= set(fields):
        return None
    return data


def encode_movie_url(slug: str, source_url: str) -> str:
    """Pack a movie slug and its source page URL into one key."""
    return _b64encode(f"{slug}{_MOVIE_SEPARATOR}{source_url}")


def decode_movie_url(encoded: str) -> dict[str, str] | None:
    """Inverse of :func:`encode_movie_url`; ``None`` if malformed."""
    try:
        decoded = _b64decode(encoded)
    except (binascii.Error, UnicodeError, ValueError):
        return None
    parts = decoded.split(_MOVIE_SEPARATOR)
    if len(parts) != 2:
        return None
    return {"slug": parts[0], "source_url": parts[1]}
