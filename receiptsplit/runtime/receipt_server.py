"""FastAPI server exposing the receipt parser over HTTP."""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from receiptsplit.receipt.text_parser import parse_receipt_text
from receiptsplit.runtime.config import get_config
from receiptsplit.runtime.logging import get_logger
from receiptsplit.runtime.ocr_client import OCRServiceUnavailable, call_ocr_service_bytes_async

logger = get_logger(__name__)

app = FastAPI(title="Receipt Splitter")


async def _read_text_body(request: Request) -> str:
    """Accept either {"text": ...} JSON or a plain-text body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        payload = await request.json()
        if isinstance(payload, dict):
            text = payload.get("text")
            return text if isinstance(text, str) else ""
        return ""
    body = await request.body()
    return body.decode("utf-8", errors="replace")


@app.post("/parse")
async def parse_text(request: Request) -> JSONResponse:
    """Parse receipt text supplied directly, e.g. after the user corrected OCR output."""
    try:
        text = await _read_text_body(request)
    except ValueError:
        return JSONResponse({"status": "error", "message": "Request body is not valid JSON"}, status_code=400)

    receipt = parse_receipt_text(text)
    return JSONResponse(receipt.to_dict())


@app.post("/upload")
async def upload_receipt(request: Request) -> JSONResponse:
    """Receive a receipt image, OCR it, and return the parsed receipt."""
    form = await request.form()

    file = None
    for value in form.values():
        if hasattr(value, "read"):
            file = value
            break

    if not file:
        return JSONResponse({"status": "error", "message": "No file found in request"}, status_code=400)

    filename = getattr(file, "filename", None) or "receipt.jpg"
    contents = await file.read()
    logger.info("Received %s (%d bytes)", Path(filename).name, len(contents))

    try:
        raw_text = await call_ocr_service_bytes_async(contents, filename, get_config().ocr_url)
    except OCRServiceUnavailable as e:
        logger.error("OCR failed for %s: %s", filename, e)
        return JSONResponse({"status": "error", "message": "OCR failed"}, status_code=500)
    except OSError as e:
        # Pillow could not decode the upload.
        logger.warning("Unreadable image %s: %s", filename, e)
        return JSONResponse({"status": "error", "message": "Unreadable image"}, status_code=400)

    receipt = parse_receipt_text(raw_text)
    return JSONResponse(
        {
            "status": "success",
            "image_filename": filename,
            "raw_text": raw_text,
            "receipt": receipt.to_dict(),
        }
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
