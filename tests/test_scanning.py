"""Tests for the scanning layer and its error reporting."""

import pytest

from data_models import ParsedItem, SourceKind
from exceptions import (
    InvalidReceiptImageError,
    NoItemsFoundError,
    NoReceiptFoundError,
    NoTextFoundError,
    ScanningError,
    describe_error,
)
from scanning import INLINE_SOURCE_ID, BarcodeReceiptCatalog, ReceiptScanner


@pytest.fixture
def scanner():
    return ReceiptScanner()


class TestCatalog:
    def test_demo_codes(self):
        assert BarcodeReceiptCatalog().codes() == ["QR001", "TXN11111", "TXN12345", "TXN67890"]

    def test_register_and_lookup(self):
        catalog = BarcodeReceiptCatalog({})
        catalog.register(" ABC ", "Tea 1.50")
        assert catalog.lookup("ABC") == "Tea 1.50"
        assert catalog.lookup("XYZ") is None


class TestScanCode:
    def test_known_transaction(self, scanner):
        result = scanner.scan_code("QR001")
        assert result.source_kind is SourceKind.BARCODE
        assert result.source_id == "QR001"
        assert [i.name for i in result.items] == ["Coffee", "Muffin", "Orange Juice"]
        assert result.total == pytest.approx(10.50)

    def test_fallback_parsing_in_catalog_receipt(self, scanner):
        result = scanner.scan_code("TXN67890")
        assert ParsedItem("Whole Milk 1 Gallon", 4.29) in result.items
        assert len(result.items) == 5

    def test_inline_payload(self, scanner):
        result = scanner.scan_code("Tea 1.50\nScone 2.25")
        assert result.source_id == INLINE_SOURCE_ID
        assert result.original_text == "Tea 1.50\nScone 2.25"

    def test_unknown_code(self, scanner):
        with pytest.raises(NoReceiptFoundError):
            scanner.scan_code("NOPE")

    def test_blank_code(self, scanner):
        with pytest.raises(NoReceiptFoundError):
            scanner.scan_code("   ")

    def test_catalog_receipt_without_items(self):
        scanner = ReceiptScanner(BarcodeReceiptCatalog({"EMPTY": "Total 0.00"}))
        with pytest.raises(NoItemsFoundError):
            scanner.scan_code("EMPTY")


class TestScanText:
    def test_ocr_result(self, scanner):
        result = scanner.scan_text("Sandwich 5.50\nWater 1.00\nTotal 6.50", source_id="OCR_1")
        assert result.source_kind is SourceKind.OCR
        assert result.source_id == "OCR_1"
        assert result.total == pytest.approx(6.50)

    def test_generated_source_id(self, scanner):
        assert scanner.scan_text("Water 1.00").source_id.startswith("OCR_")

    def test_no_text(self, scanner):
        with pytest.raises(NoTextFoundError):
            scanner.scan_text(" \n ")

    def test_not_a_receipt(self, scanner):
        with pytest.raises(InvalidReceiptImageError):
            scanner.scan_text("Hello world\nhow are you")

    def test_receipt_without_items(self, scanner):
        with pytest.raises(NoItemsFoundError):
            scanner.scan_text("Total: $15.99\nTax: $1.20")


class TestDescribeError:
    def test_scanning_error(self):
        info = describe_error(NoItemsFoundError())
        assert info.title == "Scanning Error"
        assert "add items manually" in info.message
        assert info.recovery_action == "manual_entry"

    def test_all_scanning_errors_share_base(self):
        for error in (NoTextFoundError, InvalidReceiptImageError, NoItemsFoundError, NoReceiptFoundError):
            assert issubclass(error, ScanningError)

    def test_custom_message(self):
        assert describe_error(NoTextFoundError("blurry")).message == "blurry"

    def test_unknown_error(self):
        info = describe_error(RuntimeError("boom"))
        assert info.title == "Error"
        assert info.recovery_action == ""
