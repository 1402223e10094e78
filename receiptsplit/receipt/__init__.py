"""Receipt text interpretation engine."""

from .amounts import extract_amount, find_amount
from .line_classifier import LineClassification, classify_line
from .normalization import normalize_text
from .text_parser import parse_receipt_text, split_receipt_lines

__all__ = [
    "classify_line",
    "extract_amount",
    "find_amount",
    "LineClassification",
    "normalize_text",
    "parse_receipt_text",
    "split_receipt_lines",
]
