"""Interactive USDT price lookup for Binance and Bitget."""

__version__ = "0.1.0"
