"""Generic JSON cache on top of Redis, plus the user document cache."""

from __future__ import annotations

import json
from typing import Any

import redis  # type: ignore[import-untyped]

from authgate.services._shared.errors import STORE_FAILURES, StoreUnavailableError


class RedisJSONCache:
    """
    Keyed cache storing JSON-encoded values.

    :param r: A Redis client (already connected).
    :param prefix: Optional namespace prepended to every key.
    :param user_ttl: Lifetime in seconds of cached user documents.
    """

    def __init__(self, r: redis.Redis, prefix: str = "", user_ttl: int = 1800) -> None:
        self.r = r
        self.prefix = prefix
        self.user_ttl = user_ttl

    def _k(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store ``value``; without ``ttl`` the entry never expires."""
        payload = json.dumps(value)
        try:
            if ttl:
                self.r.set(self._k(key), payload, ex=int(ttl))
            else:
                self.r.set(self._k(key), payload)
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("SET") from exc

    def get(self, key: str) -> Any | None:
        try:
            raw = self.r.get(self._k(key))
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("GET") from exc
        return json.loads(raw) if raw else None

    def delete(self, key: str) -> bool:
        try:
            return int(self.r.delete(self._k(key))) > 0
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("DEL") from exc

    def exists(self, key: str) -> bool:
        try:
            return int(self.r.exists(self._k(key))) == 1
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("EXISTS") from exc

    # ------------------------- user documents -------------------------

    @staticmethod
    def _user_key(user_id: str) -> str:
        return f"user:{user_id}"

    def cache_user(self, user_id: str, user_data: Any, ttl: int | None = None) -> None:
        self.set(self._user_key(user_id), user_data, ttl=self.user_ttl if ttl is None else ttl)

    def get_cached_user(self, user_id: str) -> Any | None:
        return self.get(self._user_key(user_id))

    def invalidate_user(self, user_id: str) -> bool:
        return self.delete(self._user_key(user_id))
