"""Token-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

# Upper bound on accepted token length; longer bodies are rejected before
# they reach the store.
MAX_TOKEN_LENGTH = 4096

# Longest denial accepted (30 days).
MAX_REVOKE_TTL = 60 * 60 * 24 * 30

_token_field_kwargs = {
    "required": True,
    "validate": [
        validate.Length(min=1, max=MAX_TOKEN_LENGTH),
        validate.Regexp(r"\s*\S", error="Token must not be blank."),
    ],
}


class TokenLookupSchema(Schema):
    """Input payload for resolving a session token."""

    token = fields.String(**_token_field_kwargs)


class TokenRevokeSchema(Schema):
    """Input payload for adding a token to the denylist."""

    token = fields.String(**_token_field_kwargs)
    ttl = fields.Integer(
        required=True,
        strict=True,
        validate=validate.Range(min=1, max=MAX_REVOKE_TTL),
    )


class TokenRecordSchema(Schema):
    """Response payload for a resolved token."""

    token = fields.String(required=True)
    value = fields.Raw(allow_none=False)
