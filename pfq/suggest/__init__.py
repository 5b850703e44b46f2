"""Incremental search-suggestion engine.

Pure pieces (models, grouping, highlighting) are re-exported here; the
Qt-driven pieces live in :mod:`.debounce`, :mod:`.executor` and
:mod:`.controller` so that importing this package does not need a Qt
application.
"""
from .models import RawResult, SuggestionGroup, Segment, total_listings
from .grouping import group_results, normalize_description
from .highlight import highlight
from .pipeline import fetch_suggestions

__all__ = [
    "RawResult",
    "SuggestionGroup",
    "Segment",
    "total_listings",
    "group_results",
    "normalize_description",
    "highlight",
    "fetch_suggestions",
]
