"""
Receipt plausibility check for Grocery Split

A cheap gate telling the caller whether recognized text looks like it came
from a purchase receipt at all.
"""

import re

from constants import CURRENCY_SYMBOLS, PRICE_TOKEN_PATTERN, RECEIPT_KEYWORDS

_PRICE_TOKEN = re.compile(PRICE_TOKEN_PATTERN)


def has_price_token(text: str) -> bool:
    return bool(_PRICE_TOKEN.search(text))


def has_currency_symbol(text: str) -> bool:
    return any(symbol in text for symbol in CURRENCY_SYMBOLS)


def has_receipt_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in RECEIPT_KEYWORDS)


def is_plausible_receipt(text: str) -> bool:
    """True if the text has a price, a currency symbol or receipt vocabulary"""
    if not isinstance(text, str) or not text:
        return False
    return has_price_token(text) or has_currency_symbol(text) or has_receipt_keyword(text)
