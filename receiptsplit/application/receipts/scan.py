"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from receiptsplit.receipt.text_parser import parse_receipt_text
from receiptsplit.runtime.ocr_client import OCRServiceUnavailable, call_ocr_service

if TYPE_CHECKING:
    from receiptsplit.domain.receipt import ParsedReceipt

ScanStatus = Literal["file_not_found", "unreadable_image", "ocr_unavailable", "parsed"]


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    image_path: Path
    ocr_url: str


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    receipt: ParsedReceipt | None = None
    raw_text: str = ""
    error: str | None = None


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: OCR -> parse."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.image_path}",
        )

    try:
        raw_text = call_ocr_service(request.image_path, request.ocr_url)
    except OCRServiceUnavailable as exc:
        return ReceiptScanResult(
            status="ocr_unavailable",
            error=str(exc),
        )
    except OSError as exc:
        # Pillow raises UnidentifiedImageError, an OSError, for non-image files.
        return ReceiptScanResult(
            status="unreadable_image",
            error=f"Cannot read receipt image {request.image_path}: {exc}",
        )

    return ReceiptScanResult(
        status="parsed",
        receipt=parse_receipt_text(raw_text),
        raw_text=raw_text,
    )
