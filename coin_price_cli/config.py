"""Configuration for the coin price CLI."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

from . import __version__

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class HttpConfig:
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = f"coin-price/{__version__}"


@dataclass
class ExchangeEndpoints:
    binance_base_url: str = "https://api.binance.com"
    bitget_base_url: str = "https://api.bitget.com"
    quote_asset: str = "USDT"


@dataclass
class AppConfig:
    http: HttpConfig = field(default_factory=HttpConfig)
    endpoints: ExchangeEndpoints = field(default_factory=ExchangeEndpoints)
    log_level: str = DEFAULT_LOG_LEVEL


DEFAULT_CONFIG = AppConfig()


def _timeout_from_env(raw: Optional[str]) -> float:
    """Positive finite seconds, else the default."""
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return value


def _log_level_from_env(raw: Optional[str]) -> str:
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to ints and unknown ones to "Level %s"
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def load_config_from_env() -> AppConfig:
    """Build an AppConfig, letting environment variables override defaults.

    Unusable timeout or log level values fall back to the defaults.
    """
    defaults = ExchangeEndpoints()
    return AppConfig(
        http=HttpConfig(
            timeout_seconds=_timeout_from_env(os.getenv("COIN_PRICE_HTTP_TIMEOUT")),
        ),
        endpoints=ExchangeEndpoints(
            binance_base_url=os.getenv("COIN_PRICE_BINANCE_URL", defaults.binance_base_url).rstrip("/"),
            bitget_base_url=os.getenv("COIN_PRICE_BITGET_URL", defaults.bitget_base_url).rstrip("/"),
        ),
        log_level=_log_level_from_env(os.getenv("COIN_PRICE_LOG_LEVEL")),
    )
