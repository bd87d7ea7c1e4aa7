"""
Unit tests for TokenGateway.

Covers hits, misses, store outages and the read-only contract against both
fakeredis and the in-memory reader.
"""

from __future__ import annotations

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from authgate.services._shared.errors import StoreUnavailableError
from authgate.services._shared.ports import InMemoryKeyValueReader
from authgate.services.tokens import TokenGateway


class RecordingReader:
    """Reader double remembering every key it was asked for."""

    def __init__(self, value=None):
        self.value = value
        self.keys: list[str] = []

    def get(self, name):
        self.keys.append(name)
        return self.value


class FailingReader:
    """Reader double raising the given exception on every read."""

    def __init__(self, exc: BaseException):
        self.exc = exc

    def get(self, name):
        raise self.exc


@pytest.fixture
def gateway(fake_redis) -> TokenGateway:
    fake_redis.set("abc123", "session-payload-1")
    return TokenGateway(fake_redis)


def test_find_token_returns_stored_value(gateway):
    assert gateway.find_token("abc123") == "session-payload-1"


def test_find_token_returns_none_when_absent(gateway):
    assert gateway.find_token("doesnotexist") is None


def test_find_token_with_in_memory_reader():
    gateway = TokenGateway(InMemoryKeyValueReader({"abc123": {"user_id": "u1"}}))

    assert gateway.find_token("abc123") == {"user_id": "u1"}
    assert gateway.find_token("other") is None


def test_find_token_returns_value_untouched():
    """No deserialization: a JSON string stays a string."""
    gateway = TokenGateway(InMemoryKeyValueReader({"t": '{"user_id": "u1"}'}))
    assert gateway.find_token("t") == '{"user_id": "u1"}'


def test_find_token_passes_token_through_unchanged():
    reader = RecordingReader()
    gateway = TokenGateway(reader)

    gateway.find_token("")
    gateway.find_token("  spaced token ")

    assert reader.keys == ["", "  spaced token "]


def test_find_token_does_not_mutate_store(gateway, fake_redis):
    before = sorted(fake_redis.keys("*"))

    first = gateway.find_token("abc123")
    second = gateway.find_token("abc123")
    gateway.find_token("doesnotexist")

    assert first == second == "session-payload-1"
    assert sorted(fake_redis.keys("*")) == before
    assert fake_redis.ttl("abc123") == -1


def test_find_token_raises_store_unavailable_on_outage(down_redis):
    gateway = TokenGateway(down_redis)

    with pytest.raises(StoreUnavailableError) as excinfo:
        gateway.find_token("abc123")

    assert isinstance(excinfo.value.__cause__, RedisConnectionError)
    assert excinfo.value.operation == "GET"


def test_outage_affects_previously_known_tokens():
    server_reader = RecordingReader(value="session-payload-1")
    gateway = TokenGateway(server_reader)
    assert gateway.find_token("abc123") == "session-payload-1"

    gateway.reader = FailingReader(RedisConnectionError("connection refused"))
    for token in ("abc123", "doesnotexist", ""):
        with pytest.raises(StoreUnavailableError):
            gateway.find_token(token)


@pytest.mark.parametrize(
    "exc",
    [
        RedisTimeoutError("timed out"),
        ConnectionRefusedError("refused"),
        TimeoutError("slow"),
    ],
)
def test_timeouts_and_socket_errors_are_store_unavailable(exc):
    gateway = TokenGateway(FailingReader(exc))

    with pytest.raises(StoreUnavailableError) as excinfo:
        gateway.find_token("abc123")

    assert excinfo.value.__cause__ is exc


def test_non_store_errors_propagate_unchanged():
    gateway = TokenGateway(FailingReader(KeyError("bug")))

    with pytest.raises(KeyError):
        gateway.find_token("abc123")
