"""Symbol input validation."""
from __future__ import annotations

import unicodedata

from .errors import EmptyInputError, InvalidCharacterError


def validate_symbol(text: str) -> None:
    """Accept only a non-empty run of uppercase letters.

    Uppercase means Unicode category ``Lu``, so ``"ÄÖ"`` passes while digits,
    lowercase and titlecase letters do not.
    """
    if not text:
        raise EmptyInputError()
    for char in text:
        if unicodedata.category(char) != "Lu":
            raise InvalidCharacterError()
