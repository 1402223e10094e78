"""Character-level cleanup of OCR receipt text."""

import re

# Alphabetic presentation forms (ligatures OCR sometimes injects).
PRESENTATION_FORMS = re.compile(r"[\uFB00-\uFB4F]")
BULLET_GLYPHS = re.compile(r"[\u2022\u00B7]")
CURRENCY_GLYPHS = re.compile(r"[\u20AC\u00A3\u00A5]")
CURLY_QUOTES = re.compile(r"[\u2018\u2019\u201C\u201D]")


def normalize_text(text: str | None) -> str:
    """
    Map OCR glyph noise onto the plain character set the line classifier expects.

    Ligature glyphs are deleted, bullets become "-", euro/pound/yen signs
    become "$", and curly quotes become a straight apostrophe. Nothing else
    is touched.
    """
    if not text:
        return ""
    text = PRESENTATION_FORMS.sub("", text)
    text = BULLET_GLYPHS.sub("-", text)
    text = CURRENCY_GLYPHS.sub("$", text)
    return CURLY_QUOTES.sub("'", text)
