"""Tests for OCR glyph normalization."""

from receiptsplit.receipt.normalization import normalize_text


def test_ligature_glyphs_are_deleted() -> None:
    assert normalize_text("Di" + chr(0xFB01) + "sh 2.00") == "Dish 2.00"
    assert normalize_text(chr(0xFB4F)) == ""


def test_bullets_become_hyphens() -> None:
    assert normalize_text(chr(0x2022) + " Coupon") == "- Coupon"
    assert normalize_text("A" + chr(0x00B7) + "B") == "A-B"


def test_currency_glyphs_become_dollar() -> None:
    text = chr(0x20AC) + "5.00 " + chr(0x00A3) + "3.00 " + chr(0x00A5) + "100"
    assert normalize_text(text) == "$5.00 $3.00 $100"


def test_curly_quotes_become_apostrophe() -> None:
    text = "Joe" + chr(0x2019) + "s " + chr(0x201C) + "Deli" + chr(0x201D) + " " + chr(0x2018) + "x"
    assert normalize_text(text) == "Joe's 'Deli' 'x"


def test_other_characters_untouched() -> None:
    text = "Caf" + chr(0xE9) + " au lait\t4.25\n#12 & more"
    assert normalize_text(text) == text


def test_missing_input_normalizes_to_empty() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("") == ""
