#!/usr/bin/env python3
"""
Utility functions for Grocery Split
"""

import re
from typing import Optional

from config import DEFAULT_CURRENCY


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format currency amount with proper symbols"""
    if not isinstance(amount, (int, float)):
        return "0.00"

    currency_symbols = {
        'BGN': 'лв',
        'USD': '$',
        'EUR': '€',
        'GBP': '£'
    }

    symbol = currency_symbols.get(currency, currency)

    if currency in ['USD', 'EUR', 'GBP']:
        return f"{symbol}{amount:.2f}"
    else:
        return f"{amount:.2f} {symbol}"


def try_parse_float(value: str) -> Optional[float]:
    """Safely parse float from string"""
    try:
        return float(value.strip().replace(',', '.'))
    except (AttributeError, ValueError):
        return None


def clean_text_for_display(text: str, max_length: int = 100) -> str:
    """Clean text for safe display in the terminal"""
    if not isinstance(text, str):
        return ""

    # Remove control characters
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', text)

    # Normalize whitespace
    text = ' '.join(text.split())

    if len(text) > max_length:
        text = text[:max_length-3] + "..."

    return text
