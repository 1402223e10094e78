"""Receipt workflows."""

from receiptsplit.application.receipts.scan import ReceiptScanRequest, ReceiptScanResult, run_receipt_scan
from receiptsplit.application.receipts.split import ReceiptSplitRequest, ReceiptSplitResult, run_receipt_split

__all__ = [
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "run_receipt_scan",
    "ReceiptSplitRequest",
    "ReceiptSplitResult",
    "run_receipt_split",
]
