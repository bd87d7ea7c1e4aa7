"""Redis adapters implementing the session-store ports."""

from __future__ import annotations

from .redis_denylist_store import RedisTokenDenylistStore
from .redis_json_cache import RedisJSONCache
from .redis_rate_limiter import RedisRateLimiter
from .redis_session_store import RedisSessionStore

__all__ = [
    "RedisTokenDenylistStore",
    "RedisJSONCache",
    "RedisRateLimiter",
    "RedisSessionStore",
]
