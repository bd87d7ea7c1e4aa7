"""Pytest fixtures wiring the app and adapters to in-memory Redis.

Every test gets a fresh ``fakeredis`` server so keys never leak between
cases; outage scenarios use a server flagged as disconnected.
"""

from __future__ import annotations

import fakeredis
import pytest

from authgate.core.config import TestingConfig
from authgate.factory import create_app


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Never reads ``REDIS_URL``; a ``fakeredis`` client is injected.
    - Uses a small lookup limit so throttling is cheap to exercise.
    - Disables ``ProxyFix`` so ``remote_addr`` is the test client address.
    """

    REDIS_URL = ""
    USE_PROXYFIX = False
    TOKEN_LOOKUP_RATE_LIMIT = 3
    TOKEN_LOOKUP_RATE_WINDOW = 60
    LOG_LEVEL = "WARNING"
    CORS_ORIGINS = "http://localhost:5173"


@pytest.fixture
def fake_redis():
    """Provide a fresh FakeRedis instance returning ``str`` values."""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def down_redis():
    """Provide a FakeRedis client whose server refuses every command."""
    server = fakeredis.FakeServer()
    server.connected = False
    return fakeredis.FakeRedis(server=server, decode_responses=True)


@pytest.fixture
def app(fake_redis):
    """Create a Flask application bound to :func:`fake_redis`."""
    application = create_app(TestConfig, redis_client=fake_redis)
    with application.app_context():
        yield application


@pytest.fixture
def client(app):
    """Return a test client bound to the application."""
    return app.test_client()


@pytest.fixture
def down_client(down_redis):
    """Return a test client whose session store is unreachable."""
    application = create_app(TestConfig, redis_client=down_redis)
    return application.test_client()


@pytest.fixture
def bare_client():
    """Return a test client for an app with no session store configured."""
    return create_app(TestConfig).test_client()
