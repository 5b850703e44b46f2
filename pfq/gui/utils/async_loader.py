"""Asynchronous data loading for GUI to prevent freezing.

Registry reads can take seconds on a slow connection; they run on a worker
thread and hand their result back through Qt signals.
"""

from __future__ import annotations
from typing import Callable, Any, Optional
from PySide6.QtCore import QObject, QThread, Signal
import logging

logger = logging.getLogger(__name__)


class AsyncDataLoader(QThread):
    """Worker thread for loading data asynchronously.

    Signals:
        loaded: Emitted when loading completes successfully (data: Any)
        error: Emitted when loading fails (error_msg: str)

    Example:
        loader = AsyncDataLoader(lambda: client.latest_pets(6))
        loader.loaded.connect(lambda pets: list_widget.show_pets(pets))
        loader.error.connect(lambda msg: status_bar.showMessage(msg))
        loader.start()
    """

    loaded = Signal(object)
    error = Signal(str)

    def __init__(self, load_func: Callable[[], Any], parent: Optional[QObject] = None):
        """Initialize async loader.

        Args:
            load_func: Function to call in background thread (should return data)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.load_func = load_func
        self._should_stop = False

    def run(self):
        """Execute loading function in background thread."""
        name = getattr(self.load_func, "__name__", "loader")
        try:
            if self._should_stop:
                logger.debug("AsyncDataLoader cancelled before start")
                return

            result = self.load_func()

            if self._should_stop:
                logger.debug("AsyncDataLoader cancelled before finish")
                return

            logger.debug(f"AsyncDataLoader finished: {name}")
            self.loaded.emit(result)

        except Exception as e:
            logger.error(f"AsyncDataLoader error in {name}: {e}", exc_info=True)
            self.error.emit(str(e))

    def stop(self):
        """Request the loader to stop (graceful shutdown)."""
        self._should_stop = True


__all__ = ["AsyncDataLoader"]
