"""Core domain models for receipt splitting.

This module provides the data models used throughout the project:
- ParsedItem, ParsedReceipt: output of the receipt text parser
- Person, SplitSession: people roster and per-person cost shares

Usage:
    from receiptsplit.domain import ParsedReceipt, SplitSession
"""

from receiptsplit.domain.receipt import TOTAL_KEYS, ParsedItem, ParsedReceipt, TotalKey
from receiptsplit.domain.split import Person, SplitSession

__all__ = [
    "ParsedItem",
    "ParsedReceipt",
    "TotalKey",
    "TOTAL_KEYS",
    "Person",
    "SplitSession",
]
