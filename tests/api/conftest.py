"""API test fixtures: FastAPI test client with settings and transport overridden.

Invariants:
    - No test reaches the network: get_transport always returns a FakeTransport
    - Settings are built per test, never read from the process environment cache
    - Overrides cleared after every test

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler's 500 is observed as a
      response instead of re-raised into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from prompt_relay.api.dependencies import get_transport
from prompt_relay.config import Settings, get_settings
from prompt_relay.main import app

from tests.services.fake_transport import FakeTransport

@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="route-test-key",
        gemini_api_base_url="https://gemini.test/v1beta",
    )


@pytest.fixture
def fake_transport():
    """Empty script; tests append replies to fake_transport._replies."""
    return FakeTransport([])


@pytest.fixture
async def client(settings, fake_transport):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_transport] = lambda: fake_transport

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
