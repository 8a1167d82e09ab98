"""Failure taxonomy of the link-resolution pipeline.

Every error aborts the whole run.  ``str(exc)`` is the human-readable message
relayed to API and CLI callers; ``stage`` records where the run stopped.
"""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    START = "start"
    FETCHING_GATEWAY = "fetching_gateway"
    RESOLVING_TOKEN = "resolving_token"
    FETCHING_LISTING = "fetching_listing"
    PARSING = "parsing"
    CLASSIFYING = "classifying"
    RANKING = "ranking"
    DONE = "done"


class ResolveError(Exception):
    """Base class for every pipeline failure."""

    default_message = "Link resolution failed"

    def __init__(self, message: str | None = None, *, stage: Stage = Stage.START) -> None:
        super().__init__(message or self.default_message)
        self.stage = stage


class MalformedInput(ResolveError):
    default_message = "Invalid URL format"


class NetworkError(ResolveError):
    """The server answered with a non-2xx status."""

    def __init__(self, status: int, message: str | None = None, *, stage: Stage = Stage.START) -> None:
        super().__init__(message or f"Request failed (status: {status})", stage=stage)
        self.status = status


class TransportError(ResolveError):
    """The request never completed (DNS, connect, timeout...)."""

    default_message = "Could not reach the server"


class TokenNotFound(ResolveError):
    default_message = "Could not find the tokenized URL"


class NoLinksFound(ResolveError):
    default_message = "No valid download links found after filtering"
