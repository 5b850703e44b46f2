"""Qt application bootstrap.

Sets up QApplication, loads configuration, wires the suggestion engine to the
registry client and launches the main window.
"""

import sys
import logging
from PySide6.QtWidgets import QApplication

from pfq.api import PetRegistryClient, WebLinks
from pfq.config import _configure_logging, load_typed_config
from pfq.config_types import AppConfig
from pfq.suggest.controller import SuggestionController
from pfq.suggest.executor import QueryExecutor
from .main_window import MainWindow
from .navigator import BrowserNavigator

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging for the GUI."""
    _configure_logging(level, fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_window(cfg: AppConfig, client: PetRegistryClient) -> MainWindow:
    """Wire client, engine and widgets together."""
    navigator = BrowserNavigator(WebLinks(cfg.web.base_url))
    executor = QueryExecutor(client.search_orders, max_groups=cfg.suggest.max_groups)
    controller = SuggestionController(
        executor,
        navigator,
        debounce_ms=cfg.suggest.debounce_ms,
        min_query_length=cfg.suggest.min_query_length,
    )
    # Parent non-widget objects to the controller so they live as long as it does
    navigator.setParent(controller)
    executor.setParent(controller)
    window = MainWindow(
        controller,
        navigator,
        load_recent=client.latest_pets,
        max_examples=cfg.suggest.max_examples,
    )
    controller.setParent(window)
    return window


def main() -> int:
    """Main entry point for GUI application.

    Returns:
        Exit code
    """
    cfg = load_typed_config(configure_logging=False)
    setup_logging(cfg.log_level)
    logger.info("Starting Quick Search GUI...")

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Get Pet Back")

    client = PetRegistryClient(cfg.api.base_url, timeout=cfg.api.timeout, retries=cfg.api.retries)
    window = build_window(cfg, client)
    window.show()
    window.refresh_recent()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
