"""SuggestionController - state machine behind the quick-search widget.

Data flows one way:

    keystroke → set_query() → Debouncer → QueryExecutor → resultsReady → view

and selections flow back out through the Navigator:

    select(group) / search_all() → navigate_to_detail / navigate_to_filtered_list

States:
    IDLE               query too short, dismissed, or just reset
    AWAITING_DEBOUNCE  qualifying query typed, quiet period running
    LOADING            request in flight
    SHOWN              latest outcome published (zero or more groups)

The view only listens to signals and calls the public operations; it never
touches the debouncer or executor directly.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional
from PySide6.QtCore import QObject, Signal
import logging

from .debounce import Debouncer
from .executor import QueryExecutor
from .models import SuggestionGroup
from .navigator import Navigator

logger = logging.getLogger(__name__)


class SearchState(Enum):
    IDLE = "idle"
    AWAITING_DEBOUNCE = "awaiting_debounce"
    LOADING = "loading"
    SHOWN = "shown"


class SuggestionController(QObject):
    """Owns query, suggestion list and panel visibility for one widget.

    Signals:
        queryChanged: Query text replaced by the controller (e.g. cleared)
        suggestionsChanged: New list of SuggestionGroup
        panelVisibilityChanged: Whether the suggestion panel should be shown
        loadingChanged: Whether a request is in flight
        stateChanged: New SearchState
    """

    queryChanged = Signal(str)
    suggestionsChanged = Signal(object)
    panelVisibilityChanged = Signal(bool)
    loadingChanged = Signal(bool)
    stateChanged = Signal(object)

    def __init__(
        self,
        executor: QueryExecutor,
        navigator: Navigator,
        debounce_ms: int = 1000,
        min_query_length: int = 5,
        parent: Optional[QObject] = None,
    ):
        """Initialize controller.

        Args:
            executor: Runs the remote searches
            navigator: Receives selection navigation requests
            debounce_ms: Quiet period before a query is searched
            min_query_length: Shortest query that triggers a search
            parent: Parent QObject
        """
        super().__init__(parent)
        self.executor = executor
        self.navigator = navigator
        self.min_query_length = min_query_length

        self._query = ""
        self._suggestions: List[SuggestionGroup] = []
        self._state = SearchState.IDLE
        self._panel_visible = False
        self._loading = False
        self._last_settled: Optional[str] = None

        self.debouncer = Debouncer(debounce_ms, self)
        self.debouncer.settled.connect(self._on_settled)
        self.executor.resultsReady.connect(self._on_results)

    # ------------------------------------------------------------------ state

    @property
    def query(self) -> str:
        return self._query

    @property
    def suggestions(self) -> List[SuggestionGroup]:
        return list(self._suggestions)

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def panel_visible(self) -> bool:
        return self._panel_visible

    @property
    def is_loading(self) -> bool:
        return self._loading

    def qualifies(self, text: str) -> bool:
        return len(text) >= self.min_query_length

    def _set_state(self, state: SearchState):
        if state != self._state:
            logger.debug(f"Quick search: {self._state.value} -> {state.value}")
            self._state = state
            self.stateChanged.emit(state)

    def _set_panel_visible(self, visible: bool):
        if visible != self._panel_visible:
            self._panel_visible = visible
            self.panelVisibilityChanged.emit(visible)

    def _set_loading(self, loading: bool):
        if loading != self._loading:
            self._loading = loading
            self.loadingChanged.emit(loading)

    def _set_suggestions(self, groups: List[SuggestionGroup]):
        self._suggestions = list(groups)
        self.suggestionsChanged.emit(self.suggestions)

    # ------------------------------------------------------------- operations

    def set_query(self, text: str):
        """Handle a keystroke: update the query and restart the quiet period."""
        if text == self._query:
            return
        self._query = text
        self.debouncer.observe(text)

        if not self.qualifies(text):
            self._last_settled = None
            self.executor.invalidate()
            self._set_loading(False)
            if self._suggestions:
                self._set_suggestions([])
            self._set_panel_visible(False)
            self._set_state(SearchState.IDLE)
            return

        self._set_state(SearchState.AWAITING_DEBOUNCE)

    def _on_settled(self, text: str):
        if not self.qualifies(text):
            return
        if text == self._last_settled:
            # Same settled value as before: the outcome (or request) still stands
            self._set_state(SearchState.LOADING if self._loading else SearchState.SHOWN)
            return
        self._last_settled = text
        self._set_loading(True)
        self._set_panel_visible(True)
        self._set_state(SearchState.LOADING)
        self.executor.search(text)

    def _on_results(self, groups: List[SuggestionGroup]):
        self._set_loading(False)
        self._set_suggestions(groups)
        self._set_state(SearchState.SHOWN)

    def focus_in(self):
        """Re-open the panel when returning to a query that has suggestions."""
        if self._suggestions and self.qualifies(self._query):
            self._set_panel_visible(True)
            if self._state == SearchState.IDLE:
                self._set_state(SearchState.SHOWN)

    def dismiss(self):
        """Interaction outside the widget: hide the panel, keep the query."""
        self._set_panel_visible(False)
        self._set_state(SearchState.IDLE)

    def select(self, group: SuggestionGroup):
        """Navigate for a chosen suggestion group and reset the widget.

        A group with a single listing opens that listing; larger groups open
        the listing search filtered by the group's description.
        """
        if group.is_single:
            logger.info(f"Opening listing {group.example_id}")
            self.navigator.navigate_to_detail(group.example_id)
        else:
            logger.info(f"Opening {group.count} listings for {group.display_description!r}")
            self.navigator.navigate_to_filtered_list(group.display_description)
        self.reset()

    def search_all(self) -> bool:
        """Search listings for the whole query, ignoring suggestions.

        Returns:
            False when the query is blank and nothing happened
        """
        text = self._query.strip()
        if not text:
            return False
        logger.info(f"Searching listings for {text!r}")
        self.navigator.navigate_to_filtered_list(text)
        self.reset()
        return True

    def reset(self):
        """Clear query and suggestions and go back to IDLE."""
        self.debouncer.cancel()
        self.executor.invalidate()
        self._last_settled = None
        if self._query:
            self._query = ""
            self.queryChanged.emit("")
        self._set_loading(False)
        if self._suggestions:
            self._set_suggestions([])
        self._set_panel_visible(False)
        self._set_state(SearchState.IDLE)

    def teardown(self):
        """Release timers and workers; call when the owning widget goes away."""
        self.debouncer.cancel()
        self.executor.shutdown()
        self._set_loading(False)


__all__ = ["SuggestionController", "SearchState"]
