"""Pytest fixtures for test configuration.

Global test safety measures:
 - Qt runs on the offscreen platform so GUI tests need no display
 - No test talks to the real registry: clients get StubSession instances
"""
import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from .mocks.fixtures import *  # noqa: F401,F403,E402


@pytest.fixture
def test_config():
    """Provide a minimal test configuration as a dict."""
    return {
        'log_level': 'DEBUG',
        'api': {'base_url': 'https://registry.test/api', 'timeout': 1.0, 'retries': 2},
        'web': {'base_url': 'https://pets.test'},
        'suggest': {'debounce_ms': 30, 'min_query_length': 5, 'max_groups': 5, 'max_examples': 2},
    }
