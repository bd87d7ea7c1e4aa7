from __future__ import annotations

import redis  # type: ignore[import-untyped]

from authgate.services._shared.errors import STORE_FAILURES, StoreUnavailableError
from authgate.services._shared.ports import TokenDenylistStore

BLACKLIST_MARKER = "blacklisted"


class RedisTokenDenylistStore(TokenDenylistStore):
    """
    Minimal denylist for revoked tokens by jti.
    """

    def __init__(self, r: redis.Redis, prefix: str = "auth:blacklist:"):
        self.r = r
        self.prefix = prefix

    def _k(self, jti: str) -> str:
        return f"{self.prefix}{jti}"

    def is_revoked(self, jti: str) -> bool:
        try:
            value = self.r.get(self._k(jti))
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("GET") from exc
        if isinstance(value, bytes | bytearray):
            value = value.decode()
        return value == BLACKLIST_MARKER

    def revoke_jti(self, *, jti: str, ttl: int) -> None:
        # store a small marker with TTL; idempotent
        try:
            self.r.set(self._k(jti), BLACKLIST_MARKER, ex=max(1, int(ttl)))
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("SET") from exc
