"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask

from authgate.core.config import BaseConfig, get_config
from authgate.core.logger import configure_logging, init_app as init_logging

if TYPE_CHECKING:
    import redis  # type: ignore[import-untyped]


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    redis_client: redis.Redis | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    ``redis_client`` replaces the client built from ``REDIS_URL``; tests pass
    a ``fakeredis.FakeRedis`` here.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Proxy headers if running behind a reverse proxy
    from authgate.core import proxy

    proxy.init_app(app)

    from authgate.core import extensions

    extensions.init_app(app, redis_client)

    init_logging(app)

    from authgate.core import cors

    cors.init_app(app)

    from authgate.api import init_app as init_api

    init_api(app)

    from authgate.core import errors

    errors.init_app(app)

    return app
