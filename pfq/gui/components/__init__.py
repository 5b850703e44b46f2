"""Reusable GUI components."""

from .outside_click import OutsideClickFilter
from .suggestion_panel import SuggestionPanel, SuggestionRow, segments_to_html
from .quick_search import QuickSearchWidget

__all__ = [
    "OutsideClickFilter",
    "SuggestionPanel",
    "SuggestionRow",
    "segments_to_html",
    "QuickSearchWidget",
]
