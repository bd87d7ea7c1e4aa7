# authgate/services/tokens/service.py
from __future__ import annotations

import logging

from authgate.core.logger import mask_token
from authgate.services._shared.base import BaseService, ServiceContext
from authgate.services._shared.errors import NotFoundError, RevokedTokenError
from authgate.services._shared.ports import TokenDenylistStore
from authgate.services.tokens.dto import TokenLookupIn, TokenRecordOut, TokenRevokeIn
from authgate.services.tokens.gateway import TokenGateway

log = logging.getLogger(__name__)


class TokenService(BaseService):
    """
    Resolve and revoke session tokens.

    Lookups consult the denylist first, then the gateway. Neither step
    retries; store failures surface as
    :class:`~authgate.services._shared.errors.StoreUnavailableError`.
    """

    def __init__(
        self,
        *,
        gateway: TokenGateway,
        denylist_store: TokenDenylistStore,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param gateway: Point-read adapter over the session store.
        :param denylist_store: Revoked token markers.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.gateway = gateway
        self.denylist = denylist_store

    def lookup(self, dto: TokenLookupIn) -> TokenRecordOut:
        """
        Return the stored record for ``dto.token``.

        :raises RevokedTokenError: If the token is on the denylist.
        :raises NotFoundError: If the store has no value for the token.
        """
        masked = mask_token(dto.token)
        if self.denylist.is_revoked(dto.token):
            log.info(
                "token.lookup.revoked",
                extra={"token": masked, "client": self.ctx.client_id},
            )
            raise RevokedTokenError()

        value = self.gateway.find_token(dto.token)
        if value is None:
            raise NotFoundError("Token", masked)
        return TokenRecordOut(token=masked, value=value)

    def revoke(self, dto: TokenRevokeIn) -> None:
        """Deny ``dto.token`` for ``dto.ttl`` seconds. Idempotent."""
        self.denylist.revoke_jti(jti=dto.token, ttl=dto.ttl)
        log.info(
            "token.revoked",
            extra={"token": mask_token(dto.token), "client": self.ctx.client_id},
        )
