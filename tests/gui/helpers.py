"""Helpers shared by GUI tests."""
from __future__ import annotations
import time
from typing import Callable, List

from PySide6.QtCore import QObject, Signal
from PySide6.QtTest import QTest


def wait_until(predicate: Callable[[], bool], timeout_ms: int = 3000) -> bool:
    """Spin the event loop until predicate() is true or the timeout expires."""
    deadline = time.monotonic() + timeout_ms / 1000
    while time.monotonic() < deadline:
        if predicate():
            return True
        QTest.qWait(10)
    return predicate()


class FakeExecutor(QObject):
    """QueryExecutor double: records searches, publishes on demand."""

    resultsReady = Signal(object)

    def __init__(self):
        super().__init__()
        self.queries: List[str] = []
        self.invalidations = 0
        self.shut_down = False

    def search(self, query: str) -> int:
        self.queries.append(query)
        return len(self.queries)

    def invalidate(self):
        self.invalidations += 1

    def shutdown(self):
        self.shut_down = True

    def publish(self, groups):
        self.resultsReady.emit(groups)
