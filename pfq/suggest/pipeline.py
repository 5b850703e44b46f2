"""Query-to-suggestions pipeline without any threading.

Failures are absorbed here: whatever goes wrong while fetching, the caller
gets an empty list, indistinguishable from a search without results.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Sequence

from ..api.errors import SearchError
from .grouping import MAX_GROUPS, group_results
from .models import RawResult, SuggestionGroup

logger = logging.getLogger(__name__)

FetchFunc = Callable[[str], Sequence[RawResult]]


def fetch_suggestions(fetch: FetchFunc, query: str, max_groups: int = MAX_GROUPS) -> List[SuggestionGroup]:
    """Fetch records for ``query`` and rank them into groups."""
    try:
        records = fetch(query)
    except SearchError as e:
        logger.warning(f"Suggestions for {query!r} unavailable: {e}")
        return []
    except Exception as e:
        logger.error(f"Suggestion fetch for {query!r} failed: {e}", exc_info=True)
        return []
    return group_results(records, max_groups)


__all__ = ["fetch_suggestions", "FetchFunc"]
