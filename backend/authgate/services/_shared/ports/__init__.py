"""
authgate.services._shared.ports
===============================

Collection of *ports* (hexagonal interfaces) that define the contracts
between the service layer and the shared key-value store.

Modules
-------
- :mod:`key_value_reader`:
    Defines :class:`~.KeyValueReader`: the single-key read capability the
    token gateway is injected with.

- :mod:`denylist_store`:
    Defines :class:`~.TokenDenylistStore`: revoked token markers.

- :mod:`session_store`:
    Defines :class:`~.SessionStore`: per-user session payloads.

- :mod:`rate_limiter`:
    Defines :class:`~.RateLimiter` and :class:`~.RateLimitResult`: fixed-window
    throttling.

Design Notes
------------
Concrete Redis adapters implement these interfaces under
``authgate.infra.redis``; the in-memory variants are test doubles.
"""

from __future__ import annotations

from .denylist_store import InMemoryDenylistStore, TokenDenylistStore
from .key_value_reader import InMemoryKeyValueReader, KeyValueReader
from .rate_limiter import InMemoryRateLimiter, RateLimiter, RateLimitResult
from .session_store import InMemorySessionStore, SessionStore

__all__ = [
    "KeyValueReader",
    "InMemoryKeyValueReader",
    "TokenDenylistStore",
    "InMemoryDenylistStore",
    "SessionStore",
    "InMemorySessionStore",
    "RateLimiter",
    "RateLimitResult",
    "InMemoryRateLimiter",
]
