"""Receipt split workflow: parse text, apply assignments, compute shares."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from receiptsplit.domain.split import SplitSession
from receiptsplit.receipt.text_parser import parse_receipt_text
from receiptsplit.runtime import get_logger
from receiptsplit.runtime.split_rules import load_split_session

logger = get_logger(__name__)

SplitStatus = Literal["file_not_found", "invalid_assignments", "split"]


@dataclass(frozen=True)
class ReceiptSplitRequest:
    """Inputs for running receipt split workflow."""

    text_path: Path
    assignments_path: Path


@dataclass(frozen=True)
class ReceiptSplitResult:
    """Outcome from receipt split workflow."""

    status: SplitStatus
    session: SplitSession | None = None
    error: str | None = None


def run_receipt_split(request: ReceiptSplitRequest) -> ReceiptSplitResult:
    """Parse receipt text from disk and split it according to an assignment file."""
    for path in (request.text_path, request.assignments_path):
        if not path.exists():
            return ReceiptSplitResult(status="file_not_found", error=f"File not found: {path}")

    receipt = parse_receipt_text(request.text_path.read_text(encoding="utf-8"))

    try:
        session = load_split_session(receipt, request.assignments_path)
    except ValueError as exc:
        # AssignmentConfigError and malformed TOML both land here.
        logger.error("Invalid assignment file %s: %s", request.assignments_path, exc)
        return ReceiptSplitResult(status="invalid_assignments", error=str(exc))

    return ReceiptSplitResult(status="split", session=session)
