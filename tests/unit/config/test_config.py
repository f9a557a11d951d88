"""Unit tests for configuration loading and typed config."""

import os

from spotcat.config import client_from_config, coerce_scalar, deep_merge, load_config, load_typed_config
from spotcat.config_types import ApiConfig, AppConfig
from spotcat.options import MarketPolicy


def test_defaults(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SPOTCAT__"):
            monkeypatch.delenv(key)
    cfg = load_typed_config()
    assert cfg.api.base_url == "https://api.spotify.com/v1/"
    assert cfg.api.token is None
    assert cfg.api.market_fallback == "US"
    assert cfg.errors.error_key == "error"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SPOTCAT__API__TOKEN", "abc-token")
    monkeypatch.setenv("SPOTCAT__API__TIMEOUT", "12.5")
    monkeypatch.setenv("SPOTCAT__LOG_LEVEL", "DEBUG")
    cfg = load_config()
    assert cfg["api"]["token"] == "abc-token"
    assert cfg["api"]["timeout"] == 12.5
    assert cfg["log_level"] == "DEBUG"


def test_dotenv_loaded_when_enabled(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPOTCAT_ENABLE_DOTENV", "1")
    monkeypatch.delenv("SPOTCAT__API__MARKET_FALLBACK", raising=False)
    (tmp_path / ".env").write_text('SPOTCAT__API__MARKET_FALLBACK="GB"  # duplicates\n', encoding="utf-8")
    assert load_config()["api"]["market_fallback"] == "GB"


def test_overrides_win(monkeypatch):
    monkeypatch.setenv("SPOTCAT__API__TOKEN", "env")
    cfg = load_config({"api": {"token": "override"}})
    assert cfg["api"]["token"] == "override"
    assert cfg["api"]["timeout"] == 30.0


def test_deep_merge_nested():
    assert deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}}) == {"a": {"b": 1, "c": 3}}


def test_coerce_scalar():
    assert coerce_scalar("true") is True
    assert coerce_scalar("none") is None
    assert coerce_scalar("42") == 42
    assert coerce_scalar("1.5") == 1.5
    assert coerce_scalar("US") == "US"
    assert coerce_scalar('["a", "b"]') == ["a", "b"]


def test_typed_round_trip():
    cfg = AppConfig(api=ApiConfig(token="t", market_fallback=None))
    assert AppConfig.from_dict(cfg.to_dict()) == cfg


def test_client_from_config():
    cfg = AppConfig(api=ApiConfig(token="t", base_url="http://x/v1", timeout=3, market_fallback=""))
    client = client_from_config(cfg)
    assert client.token == "t"
    assert client.base_url == "http://x/v1/"
    assert client.timeout == 3
    assert client.market_policy == MarketPolicy(fallback=None)


def test_market_fallback_keeps_country_code(monkeypatch):
    monkeypatch.setenv("SPOTCAT__API__MARKET_FALLBACK", "NO")
    cfg = load_typed_config()
    assert cfg.api.market_fallback == "NO"
    assert client_from_config(cfg).market_policy == MarketPolicy(fallback="NO")


def test_text_settings_not_coerced(monkeypatch):
    monkeypatch.setenv("SPOTCAT__API__TOKEN", "12345")
    monkeypatch.setenv("SPOTCAT__ERRORS__MESSAGE_KEY", "null")
    monkeypatch.setenv("SPOTCAT__API__TIMEOUT", "5")
    cfg = load_config()
    assert cfg["api"]["token"] == "12345"
    assert cfg["errors"]["message_key"] == "null"
    assert cfg["api"]["timeout"] == 5


def test_dotenv_market_fallback_no(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPOTCAT_ENABLE_DOTENV", "1")
    monkeypatch.delenv("SPOTCAT__API__MARKET_FALLBACK", raising=False)
    (tmp_path / ".env").write_text("SPOTCAT__API__MARKET_FALLBACK=no\n", encoding="utf-8")
    assert load_typed_config().api.market_fallback == "no"
