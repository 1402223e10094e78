"""People roster and per-item cost splitting for a parsed receipt."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from decimal import Decimal

from receiptsplit.domain.receipt import ParsedItem, ParsedReceipt


@dataclass(frozen=True)
class Person:
    """A participant who can be assigned receipt items."""

    id: int
    name: str


@dataclass
class SplitSession:
    """
    A parsed receipt together with the people sharing it.

    Each assigned item is divided evenly among its assignees. Items nobody
    is assigned to are left out of every share.
    """

    receipt: ParsedReceipt
    people: list[Person] = field(default_factory=list)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False)

    @property
    def items(self) -> list[ParsedItem]:
        return self.receipt.items

    def add_person(self, name: str) -> Person | None:
        """Add a person to the roster. Blank names are ignored."""
        name = (name or "").strip()
        if not name:
            return None
        person = Person(id=next(self._ids), name=name)
        self.people.append(person)
        return person

    def remove_person(self, person_id: int) -> bool:
        """Remove a person and drop them from every item they were assigned."""
        remaining = [p for p in self.people if p.id != person_id]
        if len(remaining) == len(self.people):
            return False
        self.people = remaining
        for item in self.items:
            item.assignments = [pid for pid in item.assignments if pid != person_id]
        return True

    def find_person(self, name: str) -> Person | None:
        """Look up a person by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().lower()
        for person in self.people:
            if person.name.lower() == wanted:
                return person
        return None

    def set_assignment(self, item_index: int, person_id: int, assigned: bool = True) -> None:
        """
        Assign or unassign a person for one item.

        Raises:
            IndexError: item_index does not name an item.
            KeyError: person_id is not on the roster.
        """
        if not 0 <= item_index < len(self.items):
            raise IndexError(f"No item at index {item_index}")
        if all(p.id != person_id for p in self.people):
            raise KeyError(person_id)

        item = self.items[item_index]
        if assigned:
            if person_id not in item.assignments:
                item.assignments.append(person_id)
        else:
            item.assignments = [pid for pid in item.assignments if pid != person_id]

    def person_totals(self) -> dict[int, Decimal]:
        """Return each person's share keyed by person id."""
        totals: dict[int, Decimal] = {p.id: Decimal("0") for p in self.people}
        for item in self.items:
            if not item.assignments:
                continue
            share = item.price / len(item.assignments)
            for pid in item.assignments:
                totals[pid] = totals.get(pid, Decimal("0")) + share
        return totals

    def unassigned_items(self) -> list[ParsedItem]:
        return [item for item in self.items if not item.assignments]
