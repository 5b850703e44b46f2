"""Application-wide detector for presses and focus outside a set of widgets."""
from __future__ import annotations
from typing import Callable, Optional, Sequence
from PySide6.QtCore import QEvent, QObject, QPoint
from PySide6.QtWidgets import QApplication, QWidget
import logging

logger = logging.getLogger(__name__)


class OutsideClickFilter(QObject):
    """Calls ``on_outside`` for mouse presses or focus moves outside all watched widgets.

    The filter is registered on the QApplication by ``install()``, together
    with a ``focusChanged`` connection, and both must be released with
    ``remove()``; install and remove are idempotent. Events are observed,
    never consumed.
    """

    def __init__(
        self,
        widgets: Sequence[QWidget],
        on_outside: Callable[[], None],
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._widgets = list(widgets)
        self._on_outside = on_outside
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def install(self):
        app = QApplication.instance()
        if app is None or self._installed:
            return
        app.installEventFilter(self)
        app.focusChanged.connect(self._on_focus_changed)
        self._installed = True

    def remove(self):
        if not self._installed:
            return
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
            app.focusChanged.disconnect(self._on_focus_changed)
        self._installed = False

    def contains(self, global_pos: QPoint) -> bool:
        """Whether the point lies on a visible watched widget."""
        for widget in self._widgets:
            if widget.isVisible() and widget.rect().contains(widget.mapFromGlobal(global_pos)):
                return True
        return False

    def owns(self, widget: QWidget) -> bool:
        """Whether the widget is a watched widget or one of their descendants."""
        return any(w is widget or w.isAncestorOf(widget) for w in self._widgets)

    def _on_focus_changed(self, old: Optional[QWidget], new: Optional[QWidget]):
        # None means focus left the application (window switch), not a move inside it
        if new is not None and not self.owns(new):
            self._on_outside()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        # Presses propagate up the widget tree; only the QWidget deliveries count
        if event.type() == QEvent.Type.MouseButtonPress and isinstance(obj, QWidget):
            if not self.contains(event.globalPosition().toPoint()):
                self._on_outside()
        return False


__all__ = ["OutsideClickFilter"]
