"""
Scanning module for Grocery Split
Wraps recognized text and decoded barcode payloads into scan results
"""

import time
from typing import Dict, List, Optional

from data_models import ScanResult, SourceKind
from receipt_parser import ReceiptParser
from receipt_validator import is_plausible_receipt
from constants import BARCODE_RECEIPTS
from exceptions import (
    InvalidReceiptImageError,
    NoItemsFoundError,
    NoReceiptFoundError,
    NoTextFoundError,
)
from log_setup import get_logger

log = get_logger(__name__)

# source id for payloads carrying the receipt lines themselves
INLINE_SOURCE_ID = "INLINE"


class BarcodeReceiptCatalog:
    """Receipt text known for decoded barcode/QR transaction ids"""

    def __init__(self, receipts: Optional[Dict[str, str]] = None):
        self._receipts = dict(BARCODE_RECEIPTS if receipts is None else receipts)

    def lookup(self, code: str) -> Optional[str]:
        return self._receipts.get(code.strip())

    def register(self, code: str, text: str):
        self._receipts[code.strip()] = text

    def codes(self) -> List[str]:
        return sorted(self._receipts)


class ReceiptScanner:
    """Turns acquired text into a ScanResult, or a ScanningError the UI can act on"""

    def __init__(self, catalog: Optional[BarcodeReceiptCatalog] = None,
                 parser: Optional[ReceiptParser] = None):
        self.catalog = catalog or BarcodeReceiptCatalog()
        self.parser = parser or ReceiptParser()

    def scan_code(self, payload: str) -> ScanResult:
        """Resolve a decoded barcode/QR payload: a known transaction id or inline receipt text"""
        if not payload or not payload.strip():
            raise NoReceiptFoundError()

        code = payload.strip()
        text = self.catalog.lookup(code)
        if text is None:
            items = self.parser.parse_items(payload)
            if not items:
                log.warning(f"No receipt found for code {code[:40]!r}")
                raise NoReceiptFoundError()
            return ScanResult(SourceKind.BARCODE, INLINE_SOURCE_ID, items, payload)

        items = self.parser.parse_items(text)
        if not items:
            raise NoItemsFoundError()
        return ScanResult(SourceKind.BARCODE, code, items, text)

    def scan_text(self, text: str, source_id: Optional[str] = None) -> ScanResult:
        """Wrap text returned by an external OCR engine"""
        if not text or not text.strip():
            log.warning("OCR returned no text")
            raise NoTextFoundError()

        items = self.parser.parse_items(text)
        if not items:
            if not is_plausible_receipt(text):
                log.warning("Recognized text does not look like a receipt")
                raise InvalidReceiptImageError()
            log.warning("Receipt text parsed to zero items")
            raise NoItemsFoundError()

        source_id = source_id or f"OCR_{int(time.time())}"
        return ScanResult(SourceKind.OCR, source_id, items, text)
