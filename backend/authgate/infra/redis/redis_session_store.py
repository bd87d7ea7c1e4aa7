"""Redis-backed per-user session payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import redis  # type: ignore[import-untyped]

from authgate.services._shared.errors import STORE_FAILURES, StoreUnavailableError
from authgate.services._shared.ports import SessionStore
from authgate.services._shared.ports.session_store import ensure_ttl


@dataclass(slots=True)
class RedisSessionStore(SessionStore):
    """
    Session payloads stored as JSON strings under ``<prefix><user_id>``.

    :param r: A Redis client (already connected).
    :param prefix: Key prefix, ``auth:session:`` by default.
    :param default_ttl: Lifetime in seconds when ``set_session`` gets no ``ttl``.
    """

    r: redis.Redis
    prefix: str = "auth:session:"
    default_ttl: int = 3600

    def _k(self, user_id: str) -> str:
        return f"{self.prefix}{user_id}"

    def set_session(self, user_id: str, data: Any, ttl: int | None = None) -> None:
        payload = json.dumps(data)
        ex = ensure_ttl(self.default_ttl if ttl is None else ttl)
        try:
            self.r.set(self._k(user_id), payload, ex=ex)
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("SET") from exc

    def get_session(self, user_id: str) -> Any | None:
        try:
            raw = self.r.get(self._k(user_id))
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("GET") from exc
        return json.loads(raw) if raw else None

    def delete_session(self, user_id: str) -> bool:
        try:
            return int(self.r.delete(self._k(user_id))) > 0
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("DEL") from exc
