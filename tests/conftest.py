"""
Root conftest.py for all tests
Provides common fixtures and configuration
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Settings are read at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from core.config import get_settings  # noqa: E402

# Import all centralized fixtures
from tests.fixtures import *  # noqa: F401,F403,E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings built from its own environment"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
