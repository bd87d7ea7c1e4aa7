"""Unit tests for RedisRateLimiter using fakeredis."""

from __future__ import annotations

import pytest

from authgate.infra.redis import RedisRateLimiter
from authgate.services._shared.errors import StoreUnavailableError


@pytest.fixture
def limiter(fake_redis):
    return RedisRateLimiter(r=fake_redis)


def test_hits_within_limit_are_allowed(limiter):
    first = limiter.hit("1.2.3.4", limit=2, window=60)
    second = limiter.hit("1.2.3.4", limit=2, window=60)

    assert (first.allowed, first.remaining) == (True, 1)
    assert (second.allowed, second.remaining) == (True, 0)
    assert first.limit == 2
    assert 0 < second.reset_after <= 60


def test_hit_over_limit_is_rejected(limiter):
    for _ in range(2):
        limiter.hit("1.2.3.4", limit=2, window=60)

    result = limiter.hit("1.2.3.4", limit=2, window=60)

    assert result.allowed is False
    assert result.remaining == 0


def test_identifiers_are_counted_separately(limiter):
    limiter.hit("a", limit=1, window=60)
    assert limiter.hit("b", limit=1, window=60).allowed is True
    assert limiter.hit("a", limit=1, window=60).allowed is False


def test_first_hit_arms_window_expiry(limiter, fake_redis):
    limiter.hit("c", limit=5, window=30)
    assert 0 < fake_redis.ttl("ratelimit:c") <= 30


def test_counter_without_expiry_is_rearmed(limiter, fake_redis):
    fake_redis.set("ratelimit:d", 3)

    result = limiter.hit("d", limit=5, window=30)

    assert result.remaining == 1
    assert result.reset_after == 30
    assert 0 < fake_redis.ttl("ratelimit:d") <= 30


def test_outage_raises_store_unavailable(down_redis):
    with pytest.raises(StoreUnavailableError):
        RedisRateLimiter(r=down_redis).hit("e", limit=1, window=1)
