"""Root conftest: shared test configuration."""

import os

import pytest

from roster.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """No test sees the developer's ROSTER_* variables or .env file."""
    for key in list(os.environ):
        if key.startswith("ROSTER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
