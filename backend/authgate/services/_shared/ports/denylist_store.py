from __future__ import annotations

import time
from typing import Protocol


class TokenDenylistStore(Protocol):
    """
    Abstraction for a denylist store of revoked tokens (by jti or raw token).

    Methods are expected to be idempotent.
    """

    def is_revoked(self, jti: str) -> bool: ...
    def revoke_jti(self, *, jti: str, ttl: int) -> None: ...


class InMemoryDenylistStore(TokenDenylistStore):
    """Simple in-memory denylist keyed by jti, honouring TTLs lazily."""

    def __init__(self) -> None:
        self._revoked: dict[str, float] = {}

    def is_revoked(self, jti: str) -> bool:
        deadline = self._revoked.get(jti)
        if deadline is None:
            return False
        if deadline <= time.monotonic():
            del self._revoked[jti]
            return False
        return True

    def revoke_jti(self, *, jti: str, ttl: int) -> None:
        self._revoked[jti] = time.monotonic() + max(1, int(ttl))
