"""Opens navigation targets in the system browser."""
from __future__ import annotations
from typing import Any, Callable, Optional
from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QDesktopServices
import logging

from ..api.links import WebLinks

logger = logging.getLogger(__name__)


def _open_in_browser(url: str) -> bool:
    return QDesktopServices.openUrl(QUrl(url))


class BrowserNavigator(QObject):
    """Navigator implementation backed by the web front-end.

    Signals:
        navigated: URL that was handed to the browser
    """

    navigated = Signal(str)

    def __init__(
        self,
        links: WebLinks,
        opener: Optional[Callable[[str], Any]] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize navigator.

        Args:
            links: URL builder for the front-end
            opener: Callable receiving the URL (defaults to QDesktopServices)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.links = links
        self._opener = opener or _open_in_browser

    def _open(self, url: str):
        if self._opener(url) is False:
            logger.error(f"Failed to open {url}")
            return
        self.navigated.emit(url)

    def navigate_to_detail(self, pet_id: Any) -> None:
        self._open(self.links.detail_url(pet_id))

    def navigate_to_filtered_list(self, description: str) -> None:
        self._open(self.links.filtered_list_url(description))


__all__ = ["BrowserNavigator"]
