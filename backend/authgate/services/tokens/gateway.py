"""Token lookup gateway over the shared key-value store."""

from __future__ import annotations

import logging
from typing import Any

from authgate.core.logger import mask_token
from authgate.services._shared.errors import STORE_FAILURES, StoreUnavailableError
from authgate.services._shared.ports.key_value_reader import KeyValueReader

log = logging.getLogger(__name__)


class TokenGateway:
    """
    Translate a token lookup into a single read against the session store.

    The gateway is stateless: it neither owns nor closes the injected reader,
    takes no locks, and never writes. Values are returned exactly as the
    reader hands them back (``str`` for a ``decode_responses=True`` Redis
    client).

    :param reader: Anything exposing ``get(key) -> value | None``.
    """

    def __init__(self, reader: KeyValueReader) -> None:
        self.reader = reader

    def find_token(self, token: str) -> Any | None:
        """
        Return the value stored under ``token``, or ``None`` when absent.

        The token is passed through unchanged; callers that need a non-empty
        guard apply it before reaching the gateway.

        :param token: Opaque session token used verbatim as the store key.
        :returns: Stored value or ``None``.
        :raises StoreUnavailableError: If the store call fails for any reason.
        """
        try:
            value = self.reader.get(token)
        except STORE_FAILURES as exc:
            log.warning(
                "token.lookup.store_unavailable",
                extra={"token": mask_token(token)},
                exc_info=True,
            )
            raise StoreUnavailableError("GET") from exc

        log.debug("token.lookup", extra={"token": mask_token(token), "hit": value is not None})
        return value
