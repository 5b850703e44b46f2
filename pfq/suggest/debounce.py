"""Debouncer turning a rapidly changing value into a settled one."""
from __future__ import annotations
from typing import Optional
from PySide6.QtCore import QObject, QTimer, Signal
import logging

logger = logging.getLogger(__name__)


class Debouncer(QObject):
    """Publishes a value only after it stopped changing for ``delay_ms``.

    Every ``observe()`` restarts a single-shot timer. Values replaced before
    the timer fires are dropped, never queued. ``cancel()`` disarms the timer
    and guarantees nothing is emitted afterwards.

    Signals:
        settled: Emitted with the last observed value once it is stable

    Example:
        debouncer = Debouncer(delay_ms=1000)
        line_edit.textChanged.connect(debouncer.observe)
        debouncer.settled.connect(lambda text: run_search(text))
    """

    settled = Signal(str)

    def __init__(self, delay_ms: int = 1000, parent: Optional[QObject] = None):
        """Initialize debouncer.

        Args:
            delay_ms: Quiet period in milliseconds
            parent: Parent QObject
        """
        super().__init__(parent)
        self._delay_ms = delay_ms
        self._value = ""

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    def observe(self, value: str):
        """Record a new value and restart the quiet period."""
        self._value = value
        self._timer.start(self._delay_ms)

    def cancel(self):
        """Disarm the pending timer, if any."""
        if self._timer.isActive():
            logger.debug("Debouncer cancelled with pending value")
        self._timer.stop()

    @property
    def pending(self) -> bool:
        return self._timer.isActive()

    def _on_timeout(self):
        self.settled.emit(self._value)

    def set_delay(self, ms: int):
        """Change the quiet period (applies from the next observe())."""
        self._delay_ms = ms

    def delay(self) -> int:
        return self._delay_ms


__all__ = ["Debouncer"]
