from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class KeyValueReader(Protocol):
    """
    Single-key read capability of a key-value store.

    ``redis.Redis`` and ``fakeredis.FakeRedis`` satisfy it as-is.
    """

    def get(self, name: str) -> Any | None: ...


class InMemoryKeyValueReader(KeyValueReader):
    """Dict-backed reader used in unit tests."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def get(self, name: str) -> Any | None:
        return self._data.get(name)
