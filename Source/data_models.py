"""
Data models for Grocery Split - Receipt parsing and expense splitting
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Any


class SourceKind(str, Enum):
    """Where a scanned text block came from"""
    BARCODE = "barcode"
    OCR = "ocr"

    @property
    def display_name(self) -> str:
        return "Barcode/QR" if self is SourceKind.BARCODE else "OCR Scan"


@dataclass(frozen=True)
class ParsedItem:
    """Represents a single item line on a receipt"""
    name: str
    price: float
    quantity: int = 1

    @property
    def total_price(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'price': self.price, 'quantity': self.quantity}


@dataclass(frozen=True)
class ScanResult:
    """Items parsed from one barcode or OCR pass, plus where they came from"""
    source_kind: SourceKind
    source_id: str
    items: Tuple[ParsedItem, ...] = field(default_factory=tuple)
    original_text: str = ""

    def __post_init__(self):
        # lists are accepted but stored as a tuple
        object.__setattr__(self, 'items', tuple(self.items))

    @property
    def total(self) -> float:
        return sum(item.total_price for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sourceKind': self.source_kind.value,
            'sourceId': self.source_id,
            'items': [item.to_dict() for item in self.items],
            'originalText': self.original_text,
            'total': self.total,
        }


@dataclass
class Person:
    """A participant and what they owe"""
    name: str
    amount_owed: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'amountOwed': self.amount_owed}


@dataclass(frozen=True)
class Transfer:
    """Represents a payment between two people"""
    from_person: str
    to_person: str
    amount: float

    def to_dict(self) -> Dict[str, Any]:
        return {'from': self.from_person, 'to': self.to_person, 'amount': self.amount}


@dataclass
class ErrorDisplayInfo:
    """What the presentation layer shows for a failed scan"""
    title: str
    message: str
    recovery_action: str = ""


def people_to_dicts(people: List[Person]) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in people]


# an item and who it belongs to, None when unassigned
Assignment = Tuple[ParsedItem, Optional[str]]
