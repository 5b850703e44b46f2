"""Shared fixtures for GUI tests."""
import pytest
from PySide6.QtWidgets import QApplication

from .helpers import FakeExecutor


@pytest.fixture(scope='session')
def qapp():
    """Create QApplication instance for GUI tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def fake_executor(qapp):
    return FakeExecutor()
