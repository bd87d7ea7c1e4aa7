"""Marshmallow schemas for request validation and response shaping."""

from __future__ import annotations

from .tokens import TokenLookupSchema, TokenRecordSchema, TokenRevokeSchema

__all__ = ["TokenLookupSchema", "TokenRecordSchema", "TokenRevokeSchema"]
