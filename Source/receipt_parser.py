"""
Receipt Parser module for Grocery Split
Turns recognized receipt text into a list of purchased items
"""

import math
import re
from typing import Iterable, List, Optional

from data_models import ParsedItem
from constants import IGNORE_KEYWORDS, STRUCTURED_ITEM_PATTERN, PLAIN_NUMBER_PATTERN
from log_setup import get_logger

log = get_logger(__name__)

_STRUCTURED_ITEM = re.compile(STRUCTURED_ITEM_PATTERN)
_PLAIN_NUMBER = re.compile(PLAIN_NUMBER_PATTERN)


def is_noise_line(line: str) -> bool:
    """Check if a line is empty or receipt boilerplate (totals, tax, store info)"""
    trimmed = line.strip()
    if not trimmed:
        return True

    lowered = trimmed.lower()
    # substring match: "Total:" and "Subtotal" are both caught by 'total'
    return any(keyword in lowered for keyword in IGNORE_KEYWORDS)


def _parse_price_token(token: str) -> Optional[float]:
    """Parse the trailing price token of a line, None if it is not a positive number"""
    if token.startswith('$'):
        token = token[1:]

    if not _PLAIN_NUMBER.match(token):
        return None

    price = float(token)
    if not math.isfinite(price) or price <= 0:
        return None
    return price


def _match_structured(line: str) -> Optional[ParsedItem]:
    """'Name   $1.23' where the name is letters, spaces and hyphens only"""
    match = _STRUCTURED_ITEM.match(line)
    if not match:
        return None

    name = match.group(1).strip()
    price = float(match.group(2))
    if not name or price <= 0:
        return None
    return ParsedItem(name=name, price=price)


def _match_tokens(line: str) -> Optional[ParsedItem]:
    """Fallback: last space separated token is the price, the rest is the name"""
    tokens = line.split(' ')
    if len(tokens) < 2:
        return None

    price = _parse_price_token(tokens[-1])
    if price is None:
        return None

    name = ' '.join(tokens[:-1]).strip()
    if not name or is_noise_line(name):
        return None
    return ParsedItem(name=name, price=price)


def parse_line(line: str) -> Optional[ParsedItem]:
    """Parse a single line into an item, None for noise or anything unparsable"""
    if is_noise_line(line):
        return None

    trimmed = line.strip()
    item = _match_structured(trimmed) or _match_tokens(trimmed)
    if item is None:
        log.debug(f"Skipping line: {trimmed!r}")
    return item


def parse_lines(lines: Iterable[str]) -> List[ParsedItem]:
    """Parse lines in order, dropping the ones that are not items"""
    items = []
    for line in lines:
        item = parse_line(line)
        if item is not None:
            items.append(item)
    return items


def parse_receipt_text(text: str) -> List[ParsedItem]:
    """Parse a whole newline-delimited text block"""
    if not text:
        return []
    return parse_lines(text.splitlines())


class ReceiptParser:
    """Parses recognized text to extract receipt items"""

    def parse_items(self, text: str) -> List[ParsedItem]:
        items = parse_receipt_text(text)
        log.debug(f"Parsed {len(items)} items from {len(text or '')} characters")
        return items
