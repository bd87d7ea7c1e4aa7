"""Tests for the store factories and client lookup in ``authgate.api.deps``."""

from __future__ import annotations

import pytest

from authgate.api.deps import get_json_cache, get_session_store, service_context
from authgate.core import extensions
from authgate.core.extensions import get_redis
from authgate.services._shared.errors import StoreUnavailableError


@pytest.fixture
def tuned_app(app):
    """Override store settings on the bound application."""
    app.config.update(
        REDIS_SESSION_PREFIX="test:session:",
        SESSION_TTL_SECONDS=90,
        USER_CACHE_TTL_SECONDS=45,
    )
    return app


def test_session_store_uses_configured_prefix_and_ttl(tuned_app, fake_redis):
    store = get_session_store()

    store.set_session("u1", {"role": "admin"})

    assert store.get_session("u1") == {"role": "admin"}
    assert fake_redis.exists("auth:session:u1") == 0
    assert 0 < fake_redis.ttl("test:session:u1") <= 90


def test_session_store_explicit_ttl_wins(tuned_app, fake_redis):
    get_session_store().set_session("u1", {"role": "admin"}, ttl=5)

    assert 0 < fake_redis.ttl("test:session:u1") <= 5


def test_json_cache_uses_configured_user_ttl(tuned_app, fake_redis):
    cache = get_json_cache()

    cache.cache_user("u1", {"email": "a@example.com"})

    assert cache.get_cached_user("u1") == {"email": "a@example.com"}
    assert 0 < fake_redis.ttl("user:u1") <= 45


def test_service_context_carries_client_address(app):
    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "10.0.0.7"}):
        assert service_context().client_id == "10.0.0.7"


def test_get_redis_without_client_raises_store_unavailable(monkeypatch):
    monkeypatch.setattr(extensions, "redis_client", None)

    with pytest.raises(StoreUnavailableError) as excinfo:
        get_redis()

    assert excinfo.value.operation == "CONNECT"
