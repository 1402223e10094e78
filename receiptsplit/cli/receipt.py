"""Receipt command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from receiptsplit.domain.receipt import ParsedReceipt
from receiptsplit.receipt.formatter import format_parsed_receipt, format_split_summary
from receiptsplit.receipt.text_parser import parse_receipt_text
from receiptsplit.runtime import get_config, get_logger

logger = get_logger(__name__)


def _print_receipt(receipt: ParsedReceipt, as_json: bool) -> None:
    if as_json:
        print(json.dumps(receipt.to_dict(), indent=2))
        return
    print("=" * 60)
    print("PARSED RECEIPT")
    print("=" * 60)
    print(format_parsed_receipt(receipt))
    print("=" * 60)


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse receipt text from a file, or from stdin when no file is given."""
    if args.text_file:
        path = Path(args.text_file)
        if not path.exists():
            print(f"Error: File not found: {path}")
            return 1
        text = path.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    _print_receipt(parse_receipt_text(text), args.json)
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """OCR a receipt image through the OCR service, then parse it."""
    from receiptsplit.application.receipts.scan import ReceiptScanRequest, run_receipt_scan

    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url or get_config().ocr_url,
        )
    )

    if result.status in ("file_not_found", "unreadable_image"):
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    if result.status == "ocr_unavailable":
        logger.error("%s", result.error)
        print(f"OCR service unavailable: {result.error}")
        print("Make sure the OCR service is running before scanning receipts.")
        return 1

    assert result.receipt is not None
    _print_receipt(result.receipt, args.json)
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Split a receipt's items among people listed in an assignment file."""
    from receiptsplit.application.receipts.split import ReceiptSplitRequest, run_receipt_split

    result = run_receipt_split(
        ReceiptSplitRequest(
            text_path=Path(args.text_file),
            assignments_path=Path(args.assignments),
        )
    )

    if result.status != "split":
        print(f"Error: {result.error}")
        return 1

    assert result.session is not None
    print(format_parsed_receipt(result.session.receipt))
    print()
    print(format_split_summary(result.session))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI server for parse and upload requests."""
    import uvicorn

    from receiptsplit.runtime import receipt_server as server

    config = get_config()
    host = args.host or config.host
    port = args.port or config.port

    print(f"Starting receipt server on {host}:{port}")
    print(f"Endpoints: http://{host}:{port}/parse | /upload | /health")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=host, port=port)
    return 0
