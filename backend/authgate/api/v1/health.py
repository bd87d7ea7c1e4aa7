"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from redis.exceptions import RedisError  # type: ignore[import-untyped]

from authgate.api.deps import json_response, timing
from authgate.core.extensions import get_redis
from authgate.services._shared.errors import StoreUnavailableError

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and session-store health information."""

    redis_status = "ok"
    try:
        get_redis().ping()
    except (RedisError, StoreUnavailableError):
        current_app.logger.exception("healthcheck.redis_error")
        redis_status = "fail"
    version = current_app.config.get("APP_VERSION", "dev")
    commit = current_app.config.get("APP_COMMIT", "unknown")
    payload = {
        "status": "ok" if redis_status == "ok" else "degraded",
        "redis": redis_status,
        "version": version,
        "commit": commit,
    }
    return json_response(payload)
