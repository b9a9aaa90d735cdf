"""
Shared fixtures for the test suite.
"""

import pytest
from fastapi.testclient import TestClient

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.interfaces.dependencies import get_cancellation_token
from validation_patterns.main import app
from validation_patterns.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Start every test with a fresh rate limit window."""
    limiter.reset()
    yield


@pytest.fixture
def client():
    """TestClient bound to the application, lifespan included."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def cancelled_client(client):
    """Client whose requests look cancelled by the caller."""
    token = CancellationToken()
    token.cancel()
    app.dependency_overrides[get_cancellation_token] = lambda: token
    yield client
