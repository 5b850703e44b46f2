"""Quick-search widget: input, search button and suggestion panel.

All behaviour lives in SuggestionController; this widget forwards user input
to it and mirrors its signals.
"""

from __future__ import annotations
from typing import Optional
from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget
import logging

from ...suggest.controller import SuggestionController
from .outside_click import OutsideClickFilter
from .suggestion_panel import SuggestionPanel

logger = logging.getLogger(__name__)


class QuickSearchWidget(QWidget):
    """Search field with debounced remote suggestions.

    Example:
        controller = SuggestionController(executor, navigator)
        widget = QuickSearchWidget(controller)
        ...
        widget.teardown()  # before the widget is destroyed
    """

    def __init__(self, controller: SuggestionController, max_examples: int = 2, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller

        self.input = QLineEdit()
        self.input.setPlaceholderText("Search by description...")
        self.input.setClearButtonEnabled(True)
        self.hint_label = QLabel(f"Type at least {controller.min_query_length} characters")
        self.hint_label.setProperty("muted", True)
        self.loading_label = QLabel("Searching…")
        self.search_button = QPushButton("Find")
        self.panel = SuggestionPanel(max_examples)

        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self.input, 1)
        row.addWidget(self.hint_label)
        row.addWidget(self.loading_label)
        row.addWidget(self.search_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(row)
        layout.addWidget(self.panel)

        self.input.textChanged.connect(self._on_text_changed)
        self.input.returnPressed.connect(self.controller.search_all)
        self.input.installEventFilter(self)
        self.search_button.clicked.connect(self.controller.search_all)

        self.controller.queryChanged.connect(self._on_query_replaced)
        self.controller.suggestionsChanged.connect(self.panel.set_suggestions)
        self.controller.panelVisibilityChanged.connect(self.panel.setVisible)
        self.controller.loadingChanged.connect(self._on_loading_changed)
        self.panel.groupActivated.connect(self.controller.select)
        self.panel.showAllRequested.connect(self.controller.search_all)

        self._outside_filter = OutsideClickFilter([self.input, self.panel], self.controller.dismiss, self)
        self._outside_filter.install()

        self._update_affordances(self.input.text())
        self.loading_label.setVisible(False)

    def _on_text_changed(self, text: str):
        self.panel.set_query(text)
        self._update_affordances(text)
        self.controller.set_query(text)

    def _on_query_replaced(self, text: str):
        if self.input.text() != text:
            self.input.setText(text)

    def _on_loading_changed(self, loading: bool):
        self.loading_label.setVisible(loading)
        self.panel.set_loading(loading)

    def _update_affordances(self, text: str):
        self.search_button.setEnabled(bool(text.strip()))
        self.hint_label.setVisible(bool(text) and not self.controller.qualifies(text))

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.input and event.type() == QEvent.Type.FocusIn:
            self.controller.focus_in()
        return super().eventFilter(obj, event)

    def teardown(self):
        """Release the application-wide listener and the controller's resources."""
        self._outside_filter.remove()
        self.controller.teardown()


__all__ = ["QuickSearchWidget"]
