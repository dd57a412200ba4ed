# tests/conftest.py
"""
Shared pytest fixtures.

The environment is seeded before any dolarbot module is imported, because
dolarbot.config builds its global settings at import time.
"""
import os

os.environ.setdefault("API_URL", "https://api.example.test")
os.environ.setdefault("DOLLAR_TAX_PERCENT", "30")

from unittest.mock import Mock, patch  # noqa: E402

import pytest  # noqa: E402

from dolarbot.config import Settings  # noqa: E402


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_response(status_code=200, payload=None, reason="OK"):
    resp = Mock()
    resp.status_code = status_code
    resp.reason = reason
    resp.json.return_value = payload
    return resp


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(API_URL="https://api.example.test/", DOLLAR_TAX_PERCENT="30", CACHE_MINUTES=5)


@pytest.fixture
def mock_get():
    with patch("dolarbot.adapters.providers.dolar_argentina.requests.get") as mocked:
        yield mocked


@pytest.fixture
def reporter():
    return Mock()
