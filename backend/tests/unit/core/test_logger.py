"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from authgate.core.logger import JSONFormatter, configure_logging, mask_token


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord("authgate", logging.INFO, __file__, 1, "token.lookup", None, None)
    record.token = "abcd***"
    record.hit = True
    record.client = "203.0.113.9"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "token.lookup"
    assert payload["level"] == "INFO"
    assert payload["token"] == "abcd***"
    assert payload["hit"] is True
    assert payload["client"] == "203.0.113.9"
    assert payload["request_id"] is None


def test_mask_token_keeps_prefix_only() -> None:
    assert mask_token("abcdefghijklmnop") == "abcd***"


def test_mask_token_hides_short_tokens() -> None:
    assert mask_token("abc123") == "******"
    assert mask_token("") == ""
