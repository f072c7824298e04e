"""Console rendering of fetched prices."""
from __future__ import annotations

import math
import sys
from typing import Optional, TextIO


def format_price(symbol: str, price: float) -> str:
    if math.isnan(price) or price <= 0:
        return f"Price for {symbol} is unavailable or invalid."
    return f"📈  {symbol}-USDT -> ${price:.6f}"


def display_price(symbol: str, price: float, *, output: Optional[TextIO] = None) -> None:
    print(format_price(symbol, price), file=output or sys.stdout)
