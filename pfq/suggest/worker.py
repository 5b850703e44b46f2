"""Background thread running one suggestion fetch."""

from __future__ import annotations
from typing import Optional
from PySide6.QtCore import QObject, QThread, Signal
import logging

from .pipeline import FetchFunc, fetch_suggestions

logger = logging.getLogger(__name__)


class SearchWorker(QThread):
    """Fetch and group suggestions for one query off the UI thread.

    The worker never raises; failures arrive as an empty list.

    Signals:
        loaded: (token, groups) emitted exactly once unless stopped first
    """

    loaded = Signal(int, object)

    def __init__(
        self,
        token: int,
        query: str,
        fetch: FetchFunc,
        max_groups: int = 5,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.token = token
        self.query = query
        self._fetch = fetch
        self._max_groups = max_groups
        self._should_stop = False

    def run(self):
        """Execute fetch + grouping in the background thread."""
        groups = fetch_suggestions(self._fetch, self.query, self._max_groups)
        if self._should_stop:
            logger.debug(f"SearchWorker #{self.token} stopped before publishing")
            return
        self.loaded.emit(self.token, groups)

    def stop(self):
        """Request the worker to drop its result (request is not aborted)."""
        self._should_stop = True


__all__ = ["SearchWorker"]
