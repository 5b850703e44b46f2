"""Suggestion panel rendering ranked groups under the search field.

Descriptions are rendered from highlight segments: every segment is
HTML-escaped first, matched ones are then wrapped in a marker span. No
user-provided text ever reaches the label unescaped.
"""

from __future__ import annotations
import html
from typing import List, Optional, Sequence
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
import logging

from ...suggest.highlight import highlight
from ...suggest.models import Segment, SuggestionGroup, total_listings

logger = logging.getLogger(__name__)

MARK_STYLE = "background-color: #fff3a0;"


def segments_to_html(segments: Sequence[Segment], style: str = MARK_STYLE) -> str:
    """Render highlight segments as Qt rich text."""
    parts = []
    for seg in segments:
        text = html.escape(seg.text)
        parts.append(f'<span style="{style}">{text}</span>' if seg.matched else text)
    return "".join(parts)


def _listings_label(count: int) -> str:
    return "1 listing" if count == 1 else f"{count} listings"


def _example_text(kind: Optional[str], district: Optional[str]) -> str:
    text = kind or "Animal"
    if district:
        text += f" • {district}"
    return text


class SuggestionRow(QFrame):
    """Clickable row for one suggestion group.

    Signals:
        activated: The row's SuggestionGroup
    """

    activated = Signal(object)

    def __init__(self, group: SuggestionGroup, query: str, max_examples: int = 2, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.group = group
        self.setObjectName("suggestionRow")
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)

        text_col = QVBoxLayout()
        self.description_label = QLabel()
        self.description_label.setTextFormat(Qt.TextFormat.RichText)
        self.description_label.setWordWrap(True)
        self.description_label.setText(segments_to_html(highlight(group.display_description, query)))
        text_col.addWidget(self.description_label)

        self.detail_labels: List[QLabel] = []
        if group.is_single:
            member = group.members[0]
            if member.kind:
                self._add_detail(text_col, _example_text(member.kind, member.district))
            hint = "Click to open this listing"
        else:
            for member in group.examples(max_examples):
                self._add_detail(text_col, "• " + _example_text(member.kind, member.district))
            hidden = group.hidden_count(max_examples)
            if hidden:
                self._add_detail(text_col, f"… and {_listings_label(hidden)} more")
            hint = "Click to see all listings with this description"
        self._add_detail(text_col, hint)
        layout.addLayout(text_col, 1)

        self.badge = QLabel(_listings_label(group.count))
        self.badge.setObjectName("countBadge")
        layout.addWidget(self.badge, 0, Qt.AlignmentFlag.AlignTop)

    def _add_detail(self, layout: QVBoxLayout, text: str):
        label = QLabel(text)
        label.setTextFormat(Qt.TextFormat.PlainText)
        label.setProperty("muted", True)
        layout.addWidget(label)
        self.detail_labels.append(label)

    def mousePressEvent(self, event: QMouseEvent):
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.activated.emit(self.group)
        event.accept()


class SuggestionPanel(QFrame):
    """Dropdown-style panel listing suggestion groups.

    Signals:
        groupActivated: SuggestionGroup chosen by the user
        showAllRequested: "Show all results" pressed
    """

    groupActivated = Signal(object)
    showAllRequested = Signal()

    def __init__(self, max_examples: int = 2, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("suggestionPanel")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._max_examples = max_examples
        self._groups: List[SuggestionGroup] = []
        self._query = ""
        self._loading = False
        self._rows: List[SuggestionRow] = []
        self.status_label: Optional[QLabel] = None
        self.show_all_button: Optional[QPushButton] = None

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self.setVisible(False)
        self._rebuild()

    @property
    def rows(self) -> List[SuggestionRow]:
        return list(self._rows)

    def set_loading(self, loading: bool):
        if loading != self._loading:
            self._loading = loading
            self._rebuild()

    def set_suggestions(self, groups: Sequence[SuggestionGroup]):
        self._groups = list(groups)
        self._rebuild()

    def set_query(self, query: str):
        if query != self._query:
            self._query = query
            self._rebuild()

    def _clear(self):
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.hide()
                widget.deleteLater()
        self._rows = []
        self.status_label = None
        self.show_all_button = None

    def _add_status(self, text: str):
        self.status_label = QLabel(text)
        self.status_label.setTextFormat(Qt.TextFormat.PlainText)
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setContentsMargins(8, 8, 8, 8)
        self._layout.addWidget(self.status_label)

    def _rebuild(self):
        self._clear()
        if self._loading:
            self._add_status("Looking for matches…")
            return
        if not self._groups:
            self._add_status(f'Nothing found for "{self._query}"\nTry a different query')
            return

        self._add_status(f"Descriptions found: {len(self._groups)}")
        for group in self._groups:
            row = SuggestionRow(group, self._query, self._max_examples, self)
            row.activated.connect(self.groupActivated)
            self._layout.addWidget(row)
            self._rows.append(row)

        footer = QLabel(f"{_listings_label(total_listings(self._groups))} found in total")
        footer.setTextFormat(Qt.TextFormat.PlainText)
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.addWidget(footer)
        self.show_all_button = QPushButton("Show all results")
        self.show_all_button.clicked.connect(self.showAllRequested)
        self._layout.addWidget(self.show_all_button)


__all__ = ["SuggestionPanel", "SuggestionRow", "segments_to_html"]
