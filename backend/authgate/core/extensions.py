"""Shared Redis client and initialization helpers."""

from __future__ import annotations

import logging

import redis  # type: ignore[import-untyped]
from flask import Flask, current_app, has_app_context
from redis.exceptions import RedisError  # type: ignore[import-untyped]

from authgate.services._shared.errors import StoreUnavailableError

log = logging.getLogger(__name__)

# Global singleton (import-safe); shared by every request in the process
redis_client: redis.Redis | None = None


def init_app(app: Flask, client: redis.Redis | None = None) -> None:
    """Bind the session-store client to the application.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the client under ``app.extensions["redis_client"]``.
    client: redis.Redis | None, optional
        Pre-built client (e.g. ``fakeredis.FakeRedis`` in tests). When omitted
        a client is created from ``REDIS_URL`` and pinged once so a wrong URL
        fails at startup instead of on the first request.
    """
    global redis_client

    if client is None:
        redis_url = app.config.get("REDIS_URL")
        if not redis_url:
            redis_client = None
            app.extensions.pop("redis_client", None)
            return

        timeout = app.config.get("REDIS_SOCKET_TIMEOUT")
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
        try:
            client.ping()
        except RedisError as exc:
            raise RuntimeError(f"Failed to connect to Redis at {redis_url!r}") from exc
        log.info("redis.connected")

    redis_client = client
    app.extensions["redis_client"] = client


def get_redis() -> redis.Redis:
    """Return the initialized Redis client.

    Prefers the client bound to the current application so several apps (as
    in tests) do not share one another's store.

    :raises StoreUnavailableError: If no client is configured.
    """
    if has_app_context():
        bound = current_app.extensions.get("redis_client")
        if bound is not None:
            return bound
    if redis_client is None:
        raise StoreUnavailableError(
            "CONNECT", "Redis client is not initialized. Call init_app() first."
        )
    return redis_client
