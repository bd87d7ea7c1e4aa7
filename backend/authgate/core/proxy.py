"""WSGI proxy middleware configuration helper."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Apply :class:`werkzeug.middleware.proxy_fix.ProxyFix` when enabled.

    The token lookup throttle keys clients by ``request.remote_addr``, so
    behind a reverse proxy this must be on for the limit to apply per client
    rather than per proxy. Controlled by ``USE_PROXYFIX`` (defaults to
    ``True``); a single hop is trusted for ``X-Forwarded-*`` headers.
    """
    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)
