"""Token lookup endpoints backed by the shared session store."""

from __future__ import annotations

from flask import Blueprint, request

from authgate.api.deps import get_token_service, json_response, rate_limited, timing
from authgate.schemas import TokenLookupSchema, TokenRecordSchema, TokenRevokeSchema
from authgate.services._shared.errors import ServiceError
from authgate.services.tokens import TokenLookupIn, TokenRevokeIn

bp = Blueprint("tokens", __name__, url_prefix="/tokens")

lookup_schema = TokenLookupSchema()
revoke_schema = TokenRevokeSchema()
record_schema = TokenRecordSchema()


@bp.post("/lookup")
@rate_limited(
    "tokens.lookup",
    limit_key="TOKEN_LOOKUP_RATE_LIMIT",
    window_key="TOKEN_LOOKUP_RATE_WINDOW",
)
@timing
def lookup():
    """Resolve a token to its stored session payload.

    The token travels in the body so it never lands in access logs.
    """

    data = lookup_schema.load(request.get_json(silent=True) or {})
    service = get_token_service()
    try:
        record = service.lookup(TokenLookupIn(token=data["token"]))
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"data": record_schema.dump(record)})


@bp.post("/revoke")
@timing
def revoke():
    """Deny a token for the given number of seconds."""

    data = revoke_schema.load(request.get_json(silent=True) or {})
    service = get_token_service()
    try:
        service.revoke(TokenRevokeIn(token=data["token"], ttl=data["ttl"]))
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return "", 204
