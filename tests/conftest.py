"""
Shared pytest fixtures for the Stream Adaptor tests.
"""

import os
from typing import Any, Dict

import pytest

from stream_adaptor.core.config import get_settings
from stream_adaptor.core.logging import correlation_id


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from the caller's environment and settings cache."""
    for name in list(os.environ):
        if name.startswith("STREAM_ADAPTOR_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))
    get_settings.cache_clear()
    token = correlation_id.set("")
    yield
    correlation_id.reset(token)
    get_settings.cache_clear()


@pytest.fixture
def track_payload() -> Dict[str, Any]:
    return {
        "track_id": 13158665,
        "title": "Munching at Tiannas house",
        "user": {"user_id": 3699101, "username": "alex stephens"},
        "waveform_url": None,
    }
