# authgate/services/tokens/dto.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenLookupIn:
    """
    Input DTO for a token lookup.

    :param token: Opaque session token.
    :type token: str
    """

    token: str


@dataclass(frozen=True, slots=True)
class TokenRevokeIn:
    """
    Input DTO for revoking a token.

    :param token: Opaque session token (or jti) to deny.
    :type token: str
    :param ttl: Seconds the denial lasts; match the token's remaining lifetime.
    :type ttl: int
    """

    token: str
    ttl: int


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenRecordOut:
    """
    Output DTO for a resolved token.

    :param token: Masked token, safe to echo to clients and logs.
    :type token: str
    :param value: Stored payload, untouched.
    :type value: Any
    """

    token: str
    value: Any
