"""Test-specific fixtures."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from voiceflow.config import get_settings  # noqa: E402
from voiceflow.logging_config import clear_errors  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def _lock_test_env():
    """Force test-mode environment so local .env files cannot skew results."""
    os.environ.setdefault("PYTEST_RUNNING", "1")
    os.environ.setdefault("ENV", "test")
    for key in list(os.environ):
        if key.startswith("VOICEFLOW_"):
            os.environ.pop(key)
    yield


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings for every test; monkeypatched env takes effect."""
    get_settings.cache_clear()
    clear_errors()
    yield
    get_settings.cache_clear()
