"""Data models for parsed receipt text."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

TotalKey = Literal["subtotal", "tax", "total"]

# Display order for summary totals.
TOTAL_KEYS: tuple[TotalKey, ...] = ("subtotal", "tax", "total")


@dataclass
class ParsedItem:
    """A single purchased item recovered from one receipt line."""

    name: str
    price: Decimal
    # Person ids sharing this item; only the split ledger mutates this.
    assignments: list[int] = field(default_factory=list)
    raw: str = ""  # Line text the item was read from

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": float(self.price),
            "assignments": list(self.assignments),
            "raw": self.raw,
        }


@dataclass
class ParsedReceipt:
    """Items and summary totals extracted from one block of receipt text."""

    items: list[ParsedItem] = field(default_factory=list)
    totals: dict[TotalKey, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the plain structure handed to presentation layers."""
        return {
            "items": [item.to_dict() for item in self.items],
            "totals": {key: float(self.totals[key]) for key in TOTAL_KEYS if key in self.totals},
        }
