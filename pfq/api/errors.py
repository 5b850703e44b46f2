"""Failure taxonomy for registry requests."""
from __future__ import annotations


class SearchError(Exception):
    """Base class for failed registry requests."""


class NetworkFailure(SearchError):
    """Request could not be sent or timed out."""


class HttpError(SearchError):
    """Registry answered with a non-2xx status."""

    def __init__(self, status: int, url: str = ""):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} from {url}" if url else f"HTTP {status}")


class ParseFailure(SearchError):
    """Body was not valid JSON or not shaped like a registry response."""


__all__ = ["SearchError", "NetworkFailure", "HttpError", "ParseFailure"]
