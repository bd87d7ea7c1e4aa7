"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the store
adapters, the token gateway, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``authgate/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from redis.exceptions import RedisError  # type: ignore[import-untyped]

# Failures of the key-value store client. Builtin ConnectionError and
# TimeoutError are OSError subclasses and cover non-Redis readers.
STORE_FAILURES: tuple[type[BaseException], ...] = (RedisError, OSError)


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from store adapters or the gateway.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when a keyed record is absent from the store.

    :param entity: Entity name (e.g., "Token").
    :type entity: str
    :param key: Identifier or search key (masked when sensitive).
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


class RevokedTokenError(ServiceError):
    """Raised when a token is present on the denylist."""

    def __init__(self, message: str = "Token has been revoked") -> None:
        super().__init__(message)


class StoreUnavailableError(ServiceError):
    """
    Raised when the key-value store cannot serve a call.

    The client exception is kept as ``__cause__`` (``raise ... from exc``).

    :param operation: Store operation that failed (e.g. ``"GET"``).
    :type operation: str
    """

    def __init__(self, operation: str = "GET", message: str | None = None) -> None:
        self.operation = operation
        super().__init__(message or f"Key-value store unavailable during {operation}")
