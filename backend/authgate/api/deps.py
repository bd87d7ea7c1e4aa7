"""Shared API helpers for wiring services and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from authgate.core.errors import TooManyRequests
from authgate.core.extensions import get_redis
from authgate.infra.redis import (
    RedisJSONCache,
    RedisRateLimiter,
    RedisSessionStore,
    RedisTokenDenylistStore,
)
from authgate.services._shared.base import ServiceContext
from authgate.services._shared.ports import RateLimiter, SessionStore
from authgate.services.tokens import TokenGateway, TokenService

F = TypeVar("F", bound=Callable[..., Any])

RATE_LIMIT_HEADERS = ("X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset")


def client_identifier() -> str:
    """Return the caller identity used for throttling."""

    return request.remote_addr or "unknown"


def service_context() -> ServiceContext:
    """Build the request-scoped service context."""

    return ServiceContext(client_id=client_identifier())


def get_token_service() -> TokenService:
    """Wire a :class:`TokenService` to the application's session store."""

    r = get_redis()
    return TokenService(
        gateway=TokenGateway(r),
        denylist_store=RedisTokenDenylistStore(
            r, prefix=current_app.config.get("REDIS_BLACKLIST_PREFIX", "auth:blacklist:")
        ),
        ctx=service_context(),
    )


def get_session_store() -> SessionStore:
    """Return the session store using the configured prefix and lifetime."""

    cfg = current_app.config
    return RedisSessionStore(
        get_redis(),
        prefix=cfg.get("REDIS_SESSION_PREFIX", "auth:session:"),
        default_ttl=int(cfg.get("SESSION_TTL_SECONDS", 3600)),
    )


def get_json_cache() -> RedisJSONCache:
    """Return the JSON cache; user documents expire after ``USER_CACHE_TTL_SECONDS``."""

    return RedisJSONCache(
        get_redis(), user_ttl=int(current_app.config.get("USER_CACHE_TTL_SECONDS", 1800))
    )


def get_rate_limiter() -> RateLimiter:
    """Return the limiter bound to the shared store."""

    return RedisRateLimiter(get_redis())


def rate_limited(scope: str, *, limit_key: str, window_key: str) -> Callable[[F], F]:
    """Throttle a handler per client with a fixed window read from config.

    Parameters
    ----------
    scope:
        Namespace so different endpoints keep separate counters.
    limit_key, window_key:
        Config entries holding the allowed hits and the window in seconds.

    Notes
    -----
    Successful responses carry ``X-RateLimit-*`` headers; rejected calls raise
    :class:`~authgate.core.errors.TooManyRequests` with ``Retry-After``.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            limit = int(current_app.config[limit_key])
            window = int(current_app.config[window_key])
            result = get_rate_limiter().hit(f"{scope}:{client_identifier()}", limit=limit, window=window)
            if not result.allowed:
                raise TooManyRequests(retry_after=result.reset_after, remaining=result.remaining)
            response = current_app.make_response(func(*args, **kwargs))
            response.headers[RATE_LIMIT_HEADERS[0]] = str(result.limit)
            response.headers[RATE_LIMIT_HEADERS[1]] = str(result.remaining)
            response.headers[RATE_LIMIT_HEADERS[2]] = str(result.reset_after)
            return response

        return wrapper  # type: ignore[return-value]

    return decorator


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
