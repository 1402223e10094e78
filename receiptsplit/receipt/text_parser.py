"""Turn raw receipt text into items and summary totals."""

import re

from receiptsplit.domain.receipt import ParsedItem, ParsedReceipt
from receiptsplit.runtime import get_logger

from .line_classifier import classify_line
from .normalization import normalize_text

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
# Whitespace plus the byte order mark, which str.strip() keeps.
_EDGE_SPACE = re.compile(r"^[\s\uFEFF]+|[\s\uFEFF]+$")


def split_receipt_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines, keeping their order."""
    return [line for line in (_EDGE_SPACE.sub("", raw) for raw in _LINE_BREAK.split(text)) if line]


def parse_receipt_text(text: str | None) -> ParsedReceipt:
    """
    Parse OCR or hand-edited receipt text.

    This is heuristic-based and never raises for malformed input; the worst
    case is a receipt with no items and no totals. Every call builds a fresh
    result, so re-parsing edited text simply replaces the previous one.

    Args:
        text: Raw multi-line receipt text

    Returns:
        ParsedReceipt with items in encounter order and the last value seen
        for each summary total
    """
    receipt = ParsedReceipt()
    lines = split_receipt_lines(normalize_text(text))

    previous = ""
    for line in lines:
        result = classify_line(line, previous)
        previous = line

        if result.kind == "discard":
            logger.debug("Discarded line: %r", line)
        elif result.kind == "total":
            assert result.total_key is not None and result.amount is not None
            previous_total = receipt.totals.get(result.total_key)
            if previous_total is not None:
                logger.debug("Overwriting %s %s with %s", result.total_key, previous_total, result.amount)
            receipt.totals[result.total_key] = result.amount
        elif result.kind == "item":
            assert result.name is not None and result.amount is not None
            receipt.items.append(ParsedItem(name=result.name, price=result.amount, raw=line))
        else:
            logger.debug("Skipped line without amount: %r", line)

    logger.info("Parsed %d lines into %d items and %d totals", len(lines), len(receipt.items), len(receipt.totals))
    return receipt
