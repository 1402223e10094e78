"""Runtime loader for item-to-person assignment files.

File format (TOML):

    people = ["Alice", "Bob"]

    [[assign]]
    item = 1              # 1-based item number, or an item name
    people = ["Alice", "Bob"]
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from receiptsplit.domain.receipt import ParsedReceipt
from receiptsplit.domain.split import SplitSession
from receiptsplit.runtime.config import load_toml
from receiptsplit.runtime.logging import get_logger

logger = get_logger(__name__)


class AssignmentConfigError(ValueError):
    """Raised when an assignment file references unknown people or items."""


def _resolve_item_index(session: SplitSession, ref: Any) -> int:
    if isinstance(ref, bool):
        raise AssignmentConfigError(f"Invalid item reference: {ref!r}")
    if isinstance(ref, int):
        if not 1 <= ref <= len(session.items):
            raise AssignmentConfigError(f"Item number {ref} out of range (1-{len(session.items)})")
        return ref - 1
    if isinstance(ref, str):
        wanted = ref.strip().lower()
        for idx, item in enumerate(session.items):
            if item.name.lower() == wanted:
                return idx
        raise AssignmentConfigError(f"No item named {ref!r}")
    raise AssignmentConfigError(f"Invalid item reference: {ref!r}")


def build_split_session(receipt: ParsedReceipt, config: Mapping[str, Any]) -> SplitSession:
    """Create a SplitSession from an in-memory assignment config."""
    session = SplitSession(receipt)

    for name in config.get("people", []):
        if session.find_person(str(name)) is not None:
            raise AssignmentConfigError(f"Duplicate person: {name!r}")
        if session.add_person(str(name)) is None:
            logger.warning("Ignoring blank person name")

    for rule in config.get("assign", []):
        if not isinstance(rule, Mapping) or "item" not in rule:
            raise AssignmentConfigError(f"Assignment entry needs an 'item' key: {rule!r}")
        item_index = _resolve_item_index(session, rule["item"])
        for name in rule.get("people", []):
            person = session.find_person(str(name))
            if person is None:
                raise AssignmentConfigError(f"Unknown person {name!r} for item {rule['item']!r}")
            session.set_assignment(item_index, person.id)

    return session


def load_split_session(receipt: ParsedReceipt, path: Path) -> SplitSession:
    """Load an assignment TOML file and apply it to a parsed receipt."""
    if not path.exists():
        raise FileNotFoundError(f"Assignment file not found: {path}")
    return build_split_session(receipt, load_toml(path))
