from __future__ import annotations

import json
from typing import Any, Protocol


class SessionStore(Protocol):
    """
    Per-user session payloads kept in the shared store.

    Payloads are JSON documents; expiry is delegated to the store.
    """

    def set_session(self, user_id: str, data: Any, ttl: int | None = None) -> None:
        """Store ``data`` for ``user_id``, replacing any previous payload.

        ``ttl=None`` applies the store's default lifetime.
        """

    def get_session(self, user_id: str) -> Any | None:
        """Return the decoded payload, or ``None`` when absent or expired."""

    def delete_session(self, user_id: str) -> bool:
        """Remove the payload. :returns: True if one existed."""


def ensure_ttl(ttl: int) -> int:
    """Validate a TTL in seconds; zero or negative values are rejected."""
    if isinstance(ttl, bool) or int(ttl) <= 0:
        raise ValueError(f"ttl must be a positive number of seconds, got {ttl!r}")
    return int(ttl)


class InMemorySessionStore(SessionStore):
    """
    In-memory session store used in unit tests.

    .. note::
       TTLs are validated but not enforced.
    """

    def __init__(self, default_ttl: int = 3600) -> None:
        self._sessions: dict[str, str] = {}
        self.default_ttl = default_ttl

    def set_session(self, user_id: str, data: Any, ttl: int | None = None) -> None:
        ensure_ttl(self.default_ttl if ttl is None else ttl)
        # keep the JSON round-trip so doubles reject what Redis would reject
        self._sessions[user_id] = json.dumps(data)

    def get_session(self, user_id: str) -> Any | None:
        raw = self._sessions.get(user_id)
        return json.loads(raw) if raw is not None else None

    def delete_session(self, user_id: str) -> bool:
        return self._sessions.pop(user_id, None) is not None
