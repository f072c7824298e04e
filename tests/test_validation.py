import pytest

from coin_price_cli.errors import EmptyInputError, InvalidCharacterError
from coin_price_cli.validation import validate_symbol


@pytest.mark.parametrize("symbol", ["BTC", "X", "ETHW", "ÄÖÜ", "ΣΩ"])
def test_uppercase_letters_accepted(symbol):
    assert validate_symbol(symbol) is None


def test_empty_input_rejected():
    with pytest.raises(EmptyInputError, match="input is empty"):
        validate_symbol("")


@pytest.mark.parametrize("symbol", ["btc", "BTc", "BTC1", "BT C", "BTC-", "$", "ǅ"])
def test_non_uppercase_characters_rejected(symbol):
    with pytest.raises(InvalidCharacterError, match="only capital letters are allowed"):
        validate_symbol(symbol)
