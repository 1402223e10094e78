"""Plain-text rendering of parsed receipts and split results."""

from collections.abc import Mapping
from decimal import Decimal

from receiptsplit.domain.receipt import TOTAL_KEYS, ParsedReceipt
from receiptsplit.domain.split import SplitSession


def _money(value: Decimal) -> str:
    return f"${value:.2f}"


def format_totals(totals: Mapping[str, Decimal]) -> list[str]:
    """Render detected subtotal/tax/total lines, skipping missing or zero values."""
    lines: list[str] = []
    for key in TOTAL_KEYS:
        value = totals.get(key)
        if value:
            lines.append(f"{key.capitalize()}: {_money(value)}")
    return lines


def format_parsed_receipt(receipt: ParsedReceipt) -> str:
    """
    Format a parsed receipt for terminal review.

    Example:
        Items (2):
          1. Milk - $3.49
          2. Bread - $2.10

        Detected receipt totals:
        Subtotal: $5.59
    """
    lines = [f"Items ({len(receipt.items)}):"]
    for i, item in enumerate(receipt.items, 1):
        lines.append(f"  {i}. {item.name} - {_money(item.price)}")

    total_lines = format_totals(receipt.totals)
    if total_lines:
        lines.append("")
        lines.append("Detected receipt totals:")
        lines.extend(total_lines)

    return "\n".join(lines)


def format_split_summary(session: SplitSession) -> str:
    """Render each person's share in roster order."""
    shares = session.person_totals()
    lines = [f"{person.name}: {_money(shares.get(person.id, Decimal('0')))}" for person in session.people]

    unassigned = session.unassigned_items()
    if unassigned:
        names = ", ".join(item.name for item in unassigned)
        lines.append(f"Unassigned ({len(unassigned)}): {names}")

    return "\n".join(lines)
