"""Token lookup gateway and service."""

from __future__ import annotations

from .dto import TokenLookupIn, TokenRecordOut, TokenRevokeIn
from .gateway import TokenGateway
from .service import TokenService

__all__ = ["TokenGateway", "TokenService", "TokenLookupIn", "TokenRevokeIn", "TokenRecordOut"]
