"""Price fetching against the Binance and Bitget public REST APIs."""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from .config import DEFAULT_CONFIG, AppConfig
from .errors import (
    ApiError,
    EmptyPriceDataError,
    ExchangeUnavailableError,
    MalformedResponseError,
    ResponseParseError,
)

logger = logging.getLogger(__name__)

BINANCE_TICKER_PATH = "/api/v3/ticker/price"
BITGET_TICKERS_PATH = "/api/v2/spot/market/tickers"


class Exchange(str, enum.Enum):
    BINANCE = "Binance"
    BITGET = "Bitget"

    def __str__(self) -> str:
        return self.value


@dataclass
class PriceQuote:
    symbol: str
    exchange: Exchange
    price: float


def _field(payload: Dict[str, Any], name: str) -> Any:
    """Look up *name* exactly, falling back to a case-insensitive match.

    Bitget spells the last price ``lastPr`` while older docs say ``lastpr``.
    """
    if name in payload:
        return payload[name]
    lowered = name.lower()
    for key, value in payload.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def _parse_price(raw: Any, source: str) -> float:
    # prices arrive as decimal strings; padding and digit separators are rejected
    if not isinstance(raw, str) or raw != raw.strip() or "_" in raw:
        raise MalformedResponseError(f"{source} returned an unparsable price: {raw!r}")
    try:
        price = float(raw)
    except ValueError as exc:
        raise MalformedResponseError(f"{source} returned an unparsable price: {raw!r}") from exc
    if not math.isfinite(price):
        raise MalformedResponseError(f"{source} returned a non-finite price: {raw!r}")
    return price


def extract_api_error(response: requests.Response) -> Exception:
    """Turn a failed response into the error the caller should raise.

    A JSON object (or ``null``) body becomes an ``ApiError`` carrying its
    ``msg``, which must be a string when present; anything else becomes a
    ``ResponseParseError``.
    """
    try:
        payload = response.json()
    except ValueError:
        return ResponseParseError()
    if payload is None:
        return ApiError("")
    if not isinstance(payload, dict):
        return ResponseParseError()
    message = _field(payload, "msg")
    if message is None:
        return ApiError("")
    if not isinstance(message, str):
        return ResponseParseError()
    return ApiError(message)


class ExchangeClient:
    """Thin client over the two supported exchanges' ticker endpoints."""

    def __init__(self, *, config: AppConfig = DEFAULT_CONFIG, session: Optional[requests.Session] = None) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": config.http.user_agent})
        self._fetchers: Dict[Exchange, Callable[[str], float]] = {
            Exchange.BINANCE: self.fetch_binance_price,
            Exchange.BITGET: self.fetch_bitget_price,
        }

    def _pair(self, symbol: str) -> str:
        return f"{symbol}{self._config.endpoints.quote_asset}"

    def _get_json(self, url: str, pair: str, source: str) -> Any:
        logger.debug("GET %s symbol=%s", url, pair)
        try:
            response = self._session.get(
                url,
                params={"symbol": pair},
                timeout=self._config.http.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.debug("%s request failed: %s", source, exc)
            raise ExchangeUnavailableError(f"{source} is unreachable: {exc}") from exc

        if response.status_code != 200:
            error = extract_api_error(response)
            logger.debug("%s answered %s: %s", source, response.status_code, error)
            raise error

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"{source} returned a body that is not JSON") from exc

    def fetch_binance_price(self, symbol: str) -> float:
        """Fetch the latest ``{symbol}USDT`` price from Binance."""
        url = self._config.endpoints.binance_base_url + BINANCE_TICKER_PATH
        payload = self._get_json(url, self._pair(symbol), "Binance")
        if not isinstance(payload, dict):
            raise MalformedResponseError("Binance returned an unexpected payload")
        return _parse_price(_field(payload, "price"), "Binance")

    def fetch_bitget_price(self, symbol: str) -> float:
        """Fetch the latest ``{symbol}USDT`` price from Bitget.

        Bitget wraps tickers in a ``data`` list; only the first entry is used.
        """
        url = self._config.endpoints.bitget_base_url + BITGET_TICKERS_PATH
        payload = self._get_json(url, self._pair(symbol), "Bitget")
        if not isinstance(payload, dict):
            raise MalformedResponseError("Bitget returned an unexpected payload")

        data = _field(payload, "data")
        if data is None:
            data = []
        if not isinstance(data, list):
            raise MalformedResponseError("Bitget returned a non-list data field")
        if len(data) == 0:
            raise EmptyPriceDataError(f"Bitget returned no ticker data for {self._pair(symbol)}")

        first = data[0]
        if not isinstance(first, dict):
            raise MalformedResponseError("Bitget returned an unexpected ticker entry")
        return _parse_price(_field(first, "lastpr"), "Bitget")

    def fetch_price(self, exchange: Exchange, symbol: str) -> PriceQuote:
        """Fetch the current USDT price of *symbol* on *exchange*."""
        price = self._fetchers[exchange](symbol)
        return PriceQuote(symbol=symbol, exchange=exchange, price=price)
