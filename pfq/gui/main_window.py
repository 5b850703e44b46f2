"""Main window: quick search on top, newest listings below."""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QMainWindow, QVBoxLayout, QWidget
import logging

from ..suggest.controller import SuggestionController
from ..suggest.models import RawResult
from ..suggest.navigator import Navigator
from .components import QuickSearchWidget
from .utils.async_loader import AsyncDataLoader

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window hosting the quick search."""

    def __init__(
        self,
        controller: SuggestionController,
        navigator: Navigator,
        load_recent: Optional[Callable[[], Sequence[RawResult]]] = None,
        max_examples: int = 2,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Get Pet Back – Quick Search")
        self.resize(720, 560)
        self.navigator = navigator
        self._load_recent = load_recent
        self._loader: Optional[AsyncDataLoader] = None

        central = QWidget()
        layout = QVBoxLayout(central)
        self.quick_search = QuickSearchWidget(controller, max_examples)
        layout.addWidget(self.quick_search)

        layout.addWidget(QLabel("Recently found"))
        self.recent_list = QListWidget()
        self.recent_list.itemActivated.connect(self._on_recent_activated)
        layout.addWidget(self.recent_list, 1)
        self.setCentralWidget(central)

        navigated = getattr(navigator, "navigated", None)
        if navigated is not None:
            navigated.connect(lambda url: self.statusBar().showMessage(f"Opened {url}", 5000))

    def refresh_recent(self):
        """Reload the newest listings in the background."""
        if self._load_recent is None:
            return
        if self._loader is not None:
            self._loader.stop()
            self._loader.wait()
        self.statusBar().showMessage("Loading recent listings…")
        self._loader = AsyncDataLoader(self._load_recent, self)
        self._loader.loaded.connect(self.show_recent)
        self._loader.error.connect(self._on_recent_error)
        self._loader.start()

    def show_recent(self, pets: List[RawResult]):
        self.recent_list.clear()
        for pet in pets:
            text = " • ".join(p for p in (pet.kind or "Animal", pet.district, pet.description) if p)
            item = QListWidgetItem(text)
            item.setData(Qt.ItemDataRole.UserRole, pet.id)
            self.recent_list.addItem(item)
        self.statusBar().showMessage(f"{len(pets)} recent listings", 3000)

    def _on_recent_error(self, message: str):
        self.statusBar().showMessage(f"Could not load recent listings: {message}")

    def _on_recent_activated(self, item: QListWidgetItem):
        self.navigator.navigate_to_detail(item.data(Qt.ItemDataRole.UserRole))

    def closeEvent(self, event: QCloseEvent):
        if self._loader is not None:
            self._loader.stop()
            self._loader.wait()
        self.quick_search.teardown()
        super().closeEvent(event)


__all__ = ["MainWindow"]
