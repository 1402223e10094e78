"""Per-line classification of normalized receipt text.

Each line is resolved in a fixed priority order:

1. discard - discount, membership, savings or coupon text
2. total   - subtotal / tax / grand total with a readable amount
3. item    - any other line carrying a readable amount
4. noise   - no amount at all (headers, footers, addresses)

The keyword tables below are the whole rule set. Keywords are plain
lowercase substrings, not words or patterns.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from receiptsplit.domain.receipt import TotalKey

from .amounts import extract_amount, find_amount

LineKind = Literal["noise", "discard", "total", "item"]

DISCARD_KEYWORDS: tuple[str, ...] = (
    "member",
    "savings",
    "save",
    "coupon",
    "discount",
    "redeem",
    "additional discounts",
    "department savings",
    "forl store",  # verbatim from scanned receipts
    "store coupon",
)

# Checked in order; the first key with a matching keyword wins.
TOTALS_KEYWORDS: tuple[tuple[TotalKey, tuple[str, ...]], ...] = (
    ("subtotal", ("subtotal", "sub total")),
    ("tax", ("tax",)),
    ("total", ("total", "amount due", "amount paid", "balance due", "grand total")),
)

FALLBACK_ITEM_NAME = "Item"

# Word characters are ASCII only; accented letters are dropped from names.
_NAME_NOISE = re.compile(r"[^A-Za-z0-9_\-&.\s]")


@dataclass(frozen=True)
class LineClassification:
    """Outcome of classifying a single receipt line."""

    kind: LineKind
    raw: str
    amount: Decimal | None = None
    amount_text: str | None = None
    total_key: TotalKey | None = None
    name: str | None = None


def clean_item_name(text: str) -> str:
    """Strip everything but ASCII word characters, '-', '&', '.' and whitespace."""
    return _NAME_NOISE.sub("", text or "").strip()


def match_discard_keyword(lowered: str) -> str | None:
    for keyword in DISCARD_KEYWORDS:
        if keyword in lowered:
            return keyword
    return None


def match_total_key(lowered: str) -> TotalKey | None:
    for key, keywords in TOTALS_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return key
    return None


def classify_line(line: str, previous_line: str = "") -> LineClassification:
    """
    Classify one normalized, trimmed receipt line.

    Args:
        line: The line to classify
        previous_line: The line just before it, used to recover an item
            name when the amount fills the whole line

    Returns:
        LineClassification describing what the line contributes
    """
    lowered = line.lower()
    amount_text = find_amount(line)
    amount = extract_amount(amount_text)

    # Discounts never count as totals or items, priced or not.
    if match_discard_keyword(lowered) is not None:
        return LineClassification(kind="discard", raw=line, amount=amount, amount_text=amount_text)

    if amount is None:
        return LineClassification(kind="noise", raw=line)

    total_key = match_total_key(lowered)
    if total_key is not None:
        return LineClassification(
            kind="total",
            raw=line,
            amount=amount,
            amount_text=amount_text,
            total_key=total_key,
        )

    assert amount_text is not None
    name = clean_item_name(line.replace(amount_text, "", 1))
    if not name:
        # Name is often printed on the line above its price.
        name = clean_item_name(previous_line) or FALLBACK_ITEM_NAME

    return LineClassification(kind="item", raw=line, amount=amount, amount_text=amount_text, name=name)
