"""Interactive prompt loop: ask for a symbol and an exchange, show the price."""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from .config import load_config_from_env
from .display import display_price
from .errors import PriceFetchError, PromptAbortedError, SymbolValidationError
from .exchange_client import Exchange, ExchangeClient
from .validation import validate_symbol

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]

SYMBOL_LABEL = "COIN SYMBOL"
EXCHANGE_LABEL = "Select Exchange"


def _ask(input_func: InputFunc, label: str) -> str:
    try:
        return input_func(f"{label}: ")
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAbortedError("^C" if isinstance(exc, KeyboardInterrupt) else "^D") from exc


def prompt_symbol(input_func: InputFunc = input, output: Optional[TextIO] = None) -> str:
    """Keep asking until the user types a valid symbol."""
    out = output or sys.stdout
    while True:
        text = _ask(input_func, SYMBOL_LABEL)
        try:
            validate_symbol(text)
        except SymbolValidationError as exc:
            print(f"✗ {exc}", file=out)
            continue
        return text


def prompt_exchange(input_func: InputFunc = input, output: Optional[TextIO] = None) -> Exchange:
    """Show the exchange list and return the picked one.

    Either the list number or the exchange name (any case) is accepted.
    """
    out = output or sys.stdout
    choices = list(Exchange)
    while True:
        for index, exchange in enumerate(choices, start=1):
            print(f"  {index}) {exchange}", file=out)
        answer = _ask(input_func, EXCHANGE_LABEL).strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        for exchange in choices:
            if answer.lower() == exchange.value.lower():
                return exchange
        print(f"✗ choose 1-{len(choices)}", file=out)


def run_once(client: ExchangeClient, input_func: InputFunc = input, output: Optional[TextIO] = None) -> None:
    """One prompt, fetch and display round.

    A failed fetch is reported and shown as an unavailable price.
    """
    out = output or sys.stdout
    symbol = prompt_symbol(input_func, out)
    exchange = prompt_exchange(input_func, out)

    price = 0.0
    try:
        price = client.fetch_price(exchange, symbol).price
    except PriceFetchError as exc:
        print(f"Error: {exc}", file=out)
    display_price(symbol, price, output=out)


def run(client: ExchangeClient, input_func: InputFunc = input, output: Optional[TextIO] = None) -> None:
    """Repeat rounds until a prompt is aborted."""
    while True:
        run_once(client, input_func, output)


def main() -> int:
    config = load_config_from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client = ExchangeClient(config=config)
    try:
        run(client, input)
    except PromptAbortedError as exc:
        logger.debug("prompt aborted: %s", exc)
        print(f"Prompt failed {exc}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
