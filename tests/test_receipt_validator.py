"""Tests for the receipt plausibility check."""

from receipt_validator import has_currency_symbol, has_price_token, has_receipt_keyword, is_plausible_receipt


def test_price_token():
    assert has_price_token("something 12.99 here")
    assert not has_price_token("12.9 or 1299")


def test_currency_symbol():
    assert has_currency_symbol("pay $5")
    assert has_currency_symbol("5 €")
    assert not has_currency_symbol("five")


def test_receipt_keyword_case_insensitive():
    assert has_receipt_keyword("WALMART SUPERCENTER")
    assert not has_receipt_keyword("a photo of a dog")


def test_plausible_receipt():
    assert is_plausible_receipt("Milk 3.50\nTotal 3.50")
    assert is_plausible_receipt("Starbucks")


def test_implausible_text():
    assert not is_plausible_receipt("Hello world\nhow are you")


def test_empty_and_non_string_never_raise():
    assert not is_plausible_receipt("")
    assert not is_plausible_receipt(None)
