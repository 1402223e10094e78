"""Monetary amount detection and separator disambiguation."""

import re
from decimal import Decimal, InvalidOperation

# 1-3 digits, optional 3-digit groups, then exactly two cents digits.
AMOUNT_PATTERN = re.compile(r"\d{1,3}(?:[.,]\d{3})*(?:[.,]\d{2})", re.ASCII)

# Longest numeric prefix a lenient float parser would accept.
_NUMERIC_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def find_amount(line: str) -> str | None:
    """Return the rightmost amount-shaped substring of a line, if any."""
    matches = AMOUNT_PATTERN.findall(line or "")
    if not matches:
        return None
    # Quantity and unit price usually come before the line total.
    return matches[-1]


def extract_amount(candidate: str | None) -> Decimal | None:
    """
    Convert an isolated amount string to a Decimal.

    Separator handling:
    - Both "," and "." present: whichever appears last is the decimal point,
      the other is a thousands separator ("1,234.56" and "1.234,56" both
      give 1234.56).
    - Only one kind present: every "," is read as a decimal point, so "12,50"
      is 12.50 and "1,234" is 1.234.

    Args:
        candidate: Text already isolated as a probable amount

    Returns:
        The parsed value, or None if no number can be read
    """
    if not candidate:
        return None

    s = candidate
    if "," in s and "." in s:
        if s.rfind(".") > s.rfind(","):
            s = s.replace(",", "")
        else:
            s = s.replace(".", "").replace(",", ".")
    else:
        s = s.replace(",", ".")

    s = _NON_NUMERIC.sub("", s)
    match = _NUMERIC_PREFIX.match(s)
    if not match:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None
