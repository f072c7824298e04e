import pytest

from coin_price_cli.config import (
    DEFAULT_CONFIG,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    load_config_from_env,
)


def test_defaults_point_at_public_hosts():
    assert DEFAULT_CONFIG.endpoints.binance_base_url == "https://api.binance.com"
    assert DEFAULT_CONFIG.endpoints.bitget_base_url == "https://api.bitget.com"
    assert DEFAULT_CONFIG.endpoints.quote_asset == "USDT"
    assert DEFAULT_CONFIG.http.timeout_seconds > 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COIN_PRICE_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("COIN_PRICE_BINANCE_URL", "http://localhost:9000/")
    monkeypatch.setenv("COIN_PRICE_LOG_LEVEL", "debug")
    monkeypatch.delenv("COIN_PRICE_BITGET_URL", raising=False)

    config = load_config_from_env()

    assert config.http.timeout_seconds == 2.5
    assert config.endpoints.binance_base_url == "http://localhost:9000"
    assert config.endpoints.bitget_base_url == "https://api.bitget.com"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "nan", "inf"])
def test_unusable_timeout_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("COIN_PRICE_HTTP_TIMEOUT", raw)
    assert load_config_from_env().http.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


@pytest.mark.parametrize("raw", ["FOO", "", "verbose"])
def test_unknown_log_level_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("COIN_PRICE_LOG_LEVEL", raw)
    assert load_config_from_env().log_level == DEFAULT_LOG_LEVEL


def test_known_log_level_is_kept(monkeypatch):
    monkeypatch.setenv("COIN_PRICE_LOG_LEVEL", " info ")
    assert load_config_from_env().log_level == "INFO"
