"""Tests for plain-text receipt and split rendering."""

from decimal import Decimal

from receiptsplit.domain.receipt import ParsedReceipt
from receiptsplit.domain.split import SplitSession
from receiptsplit.receipt.formatter import format_parsed_receipt, format_split_summary, format_totals
from receiptsplit.receipt.text_parser import parse_receipt_text


def test_format_parsed_receipt(sample_receipt_text: str) -> None:
    output = format_parsed_receipt(parse_receipt_text(sample_receipt_text))

    assert output == (
        "Items (2):\n"
        "  1. Milk - $3.49\n"
        "  2. Bread - $2.10\n"
        "\n"
        "Detected receipt totals:\n"
        "Subtotal: $5.59\n"
        "Tax: $0.45\n"
        "Total: $6.04"
    )


def test_format_without_totals_omits_block() -> None:
    output = format_parsed_receipt(parse_receipt_text("Milk 3.49"))
    assert "Detected receipt totals" not in output


def test_zero_totals_are_not_shown() -> None:
    assert format_totals({"tax": Decimal("0.00"), "total": Decimal("4.00")}) == ["Total: $4.00"]
    assert format_parsed_receipt(ParsedReceipt(totals={"tax": Decimal("0")})) == "Items (0):"


def test_format_split_summary_rounds_shares() -> None:
    session = SplitSession(parse_receipt_text("Cake 10.00\nTea 2.00"))
    people = [session.add_person(name) for name in ("Alice", "Bob", "Carol")]
    for person in people:
        assert person is not None
        session.set_assignment(0, person.id)

    assert format_split_summary(session) == (
        "Alice: $3.33\n"
        "Bob: $3.33\n"
        "Carol: $3.33\n"
        "Unassigned (1): Tea"
    )
