"""Unit tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from authgate.core import config


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ("production", config.ProductionConfig),
        ("TESTING", config.TestingConfig),
        ("development", config.DevelopmentConfig),
        ("unknown", config.DevelopmentConfig),
    ],
)
def test_get_config_selects_class(monkeypatch, env, expected):
    monkeypatch.setenv(config.ENV_VAR, env)
    assert config.get_config() is expected


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv(config.ENV_VAR, raising=False)
    assert config.get_config() is config.DevelopmentConfig


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("AUTHGATE_FLAG", raw)
    assert config.env_bool("AUTHGATE_FLAG") is expected


def test_env_int(monkeypatch):
    monkeypatch.setenv("AUTHGATE_NUM", "42")
    assert config.env_int("AUTHGATE_NUM", 1) == 42
    monkeypatch.setenv("AUTHGATE_NUM", " ")
    assert config.env_int("AUTHGATE_NUM", 7) == 7


def test_session_store_defaults():
    assert config.BaseConfig.REDIS_SESSION_PREFIX == "auth:session:"
    assert config.BaseConfig.REDIS_BLACKLIST_PREFIX == "auth:blacklist:"
