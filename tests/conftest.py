"""
Shared pytest fixtures for SailFrisco tests.

Upstream providers are replaced by the in-memory fakes in tests/fakes.py so
no test touches the network.
"""

import os

import pytest
from fastapi.testclient import TestClient

# ---------------------------------------------------------------------------
# Section 1: Environment setup (before ANY api.* imports)
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "warning")
os.environ.setdefault("CACHE_TTL_MS", "60000")
os.environ.setdefault("CACHE_MAX_ITEMS", "500")

from api.cache import BoundedLRUCache  # noqa: E402
from api.config import Settings  # noqa: E402
from api.state import ApplicationState  # noqa: E402
from api.tide_service import TideService  # noqa: E402
from tests.fakes import FIXED_NOW, FakeTideClient, FakeWeatherClient  # noqa: E402

# ---------------------------------------------------------------------------
# Section 2: Core fixtures
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced monotonic clock for cache TTL tests."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms / 1000.0


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        environment="testing",
        log_level="warning",
        cache_ttl_ms=60_000,
        cache_max_items=500,
    )


@pytest.fixture
def weather_client():
    return FakeWeatherClient()


@pytest.fixture
def tide_client():
    return FakeTideClient()


@pytest.fixture
def app_state(test_settings, weather_client, tide_client, fixed_now):
    """Application state wired to the fakes, with tides on a fixed clock."""
    state = ApplicationState(
        test_settings,
        weather_client=weather_client,
        tide_client=tide_client,
        cache=BoundedLRUCache(max_size=500, default_ttl_ms=60_000, name="test"),
    )
    state.tides = TideService(
        state.cache,
        tide_client,
        station_timezone=test_settings.station_timezone,
        grace_minutes=test_settings.tide_grace_minutes,
        clock=fixed_now,
    )
    return state


@pytest.fixture
def app(app_state):
    from api.main import create_app

    return create_app(state=app_state)


@pytest.fixture
def client(app):
    """FastAPI TestClient over an app with fake upstreams."""
    with TestClient(app) as test_client:
        yield test_client
