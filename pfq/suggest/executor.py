"""Issues suggestion searches and discards stale completions.

Each ``search()`` mints a new token and makes it current. Workers report back
with the token they were started with; a completion is published only while
its token is still current, so a slow early response can never overwrite a
fresher one.
"""

from __future__ import annotations
from typing import List, Optional, Set
from PySide6.QtCore import QObject, Signal
import logging

from .models import SuggestionGroup
from .pipeline import FetchFunc
from .worker import SearchWorker

logger = logging.getLogger(__name__)


class QueryExecutor(QObject):
    """Runs one logical suggestion request at a time.

    Signals:
        resultsReady: Ranked groups for the current token (list, maybe empty)
    """

    resultsReady = Signal(object)

    def __init__(self, fetch: FetchFunc, max_groups: int = 5, parent: Optional[QObject] = None):
        """Initialize executor.

        Args:
            fetch: Callable returning raw records for a query (may raise SearchError)
            max_groups: Groups kept after ranking
            parent: Parent QObject
        """
        super().__init__(parent)
        self._fetch = fetch
        self._max_groups = max_groups
        self._token = 0
        self._current: Optional[int] = None
        self._workers: Set[SearchWorker] = set()

    @property
    def current_token(self) -> Optional[int]:
        return self._current

    @property
    def in_flight(self) -> int:
        """Workers still running, stale ones included."""
        return len(self._workers)

    def _mint(self) -> int:
        self._token += 1
        self._current = self._token
        return self._token

    def search(self, query: str) -> int:
        """Start a search for ``query`` and make it the current request.

        Returns:
            The token identifying this request
        """
        token = self._mint()
        logger.debug(f"Suggestion search #{token}: {query!r}")
        self._start_worker(SearchWorker(token, query, self._fetch, self._max_groups))
        return token

    def _start_worker(self, worker: SearchWorker):
        worker.loaded.connect(self._on_loaded)
        worker.finished.connect(lambda w=worker: self._on_worker_finished(w))
        self._workers.add(worker)
        worker.start()

    def _on_worker_finished(self, worker: SearchWorker):
        self._workers.discard(worker)
        worker.deleteLater()

    def _on_loaded(self, token: int, groups: List[SuggestionGroup]):
        if token != self._current:
            logger.debug(f"Discarding stale suggestions #{token} (current: {self._current})")
            return
        self.resultsReady.emit(groups)

    def invalidate(self):
        """Retire the current token so pending completions are ignored."""
        self._current = None

    def shutdown(self):
        """Invalidate and join all workers (blocks at most one request timeout)."""
        self.invalidate()
        for worker in list(self._workers):
            worker.stop()
            worker.wait()
        self._workers.clear()


__all__ = ["QueryExecutor"]
