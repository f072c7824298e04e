"""Error hierarchy for the coin price CLI."""
from __future__ import annotations


class CoinPriceError(Exception):
    """Base error for the coin price CLI."""


class SymbolValidationError(CoinPriceError):
    """Raised when a typed coin symbol is rejected."""


class EmptyInputError(SymbolValidationError):
    """Raised when the symbol prompt receives nothing."""

    def __init__(self) -> None:
        super().__init__("input is empty")


class InvalidCharacterError(SymbolValidationError):
    """Raised when the symbol contains anything but uppercase letters."""

    def __init__(self) -> None:
        super().__init__("only capital letters are allowed")


class PriceFetchError(CoinPriceError):
    """Base for every failure on the price fetch path."""


class ApiError(PriceFetchError):
    """Raised when an exchange answers with an error envelope."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResponseParseError(PriceFetchError):
    """Raised when an error response body cannot be decoded."""

    def __init__(self) -> None:
        super().__init__("failed to parse error response")


class MalformedResponseError(PriceFetchError):
    """Raised when a successful response does not carry a usable price."""


class EmptyPriceDataError(PriceFetchError):
    """Raised when an exchange returns an empty ticker list."""


class ExchangeUnavailableError(PriceFetchError):
    """Raised when the upstream exchange API cannot be reached."""


class PromptAbortedError(CoinPriceError):
    """Raised when the user aborts an interactive prompt."""
