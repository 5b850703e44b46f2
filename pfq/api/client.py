"""Pet registry API client.

Handles all HTTP requests to the registry REST API. Every endpoint wraps its
payload as ``{"data": {...}}``; listings live under ``data.orders``.
"""

from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random_exponential

from ..suggest.models import RawResult
from .errors import HttpError, NetworkFailure, ParseFailure

logger = logging.getLogger(__name__)


def parse_listing_date(value: Any) -> Optional[datetime]:
    """Parse a listing date as an aware UTC datetime.

    Naive values are taken as UTC; anything that is not ISO 8601 gives None.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class PetRegistryClient:
    """Registry REST API client.

    ``search_orders`` backs the quick-search suggestions and issues exactly
    one request per call. The listing reads retry transient network failures.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        retries: int = 3,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            base_url: API root, e.g. ``https://pets.example/api``
            timeout: Seconds before a request is abandoned
            retries: Attempts for listing reads
            session: Optional preconfigured session (tests inject stubs)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, int(retries))
        self.session = session or requests.Session()

    def _request_json(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        """Execute one GET and decode the JSON object body.

        Raises:
            NetworkFailure: connection error or timeout
            HttpError: non-2xx status
            ParseFailure: body is not a JSON object
        """
        url = self.base_url + path
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkFailure(f"GET {url} failed: {e}") from e
        if not 200 <= r.status_code < 300:
            raise HttpError(r.status_code, url)
        try:
            body = r.json()
        except ValueError as e:
            raise ParseFailure(f"GET {url} returned invalid JSON") from e
        if not isinstance(body, dict):
            raise ParseFailure(f"GET {url} returned {type(body).__name__}, expected object")
        return body

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        """GET with retry on network failures (HTTP and parse errors are final)."""
        fetch = retry(
            retry=retry_if_exception_type(NetworkFailure),
            stop=stop_after_attempt(self.retries),
            wait=wait_random_exponential(multiplier=0.5, max=8),
            reraise=True,
        )(self._request_json)
        return fetch(path, params)

    @staticmethod
    def _records(body: Dict[str, Any], key: str) -> List[RawResult]:
        """Extract ``data.<key>`` as records; anything but a list means no results."""
        data = body.get("data")
        items = data.get(key) if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [RawResult.from_dict(item) for item in items if isinstance(item, dict)]

    def search_orders(self, query: str) -> List[RawResult]:
        """Search listings by free text (single request, no retry).

        Args:
            query: Text as typed; URL-encoded by requests

        Returns:
            Matching records in server order (possibly empty)
        """
        body = self._request_json("/search", params={"query": query})
        results = self._records(body, "orders")
        logger.debug(f"Search {query!r} returned {len(results)} records")
        return results

    def list_pets(self) -> List[RawResult]:
        """Fetch all published listings."""
        return self._records(self._get("/pets"), "orders")

    def latest_pets(self, limit: int = 6) -> List[RawResult]:
        """Newest listings first, by their ``date`` field.

        Records whose date is missing or unparseable go last, in server order.
        """
        pets = self.list_pets()
        dated = [(parse_listing_date(p.data.get("date")), p) for p in pets]
        known = sorted(((d, p) for d, p in dated if d is not None), key=lambda dp: dp[0], reverse=True)
        unknown = [p for d, p in dated if d is None]
        return ([p for _, p in known] + unknown)[:limit]

    def success_stories(self) -> List[Dict[str, Any]]:
        """Reunited pets shown on the front page slider."""
        data = self._get("/pets/slider").get("data")
        pets = data.get("pets") if isinstance(data, dict) else None
        return [p for p in pets if isinstance(p, dict)] if isinstance(pets, list) else []


__all__ = ["PetRegistryClient", "parse_listing_date"]
