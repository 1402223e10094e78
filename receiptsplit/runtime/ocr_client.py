"""HTTP client for the external OCR service."""

import time
from pathlib import Path

import httpx

from receiptsplit.receipt.ocr_helpers import ocr_response_to_text, resize_image_bytes
from receiptsplit.runtime.logging import get_logger

logger = get_logger(__name__)

OCR_TIMEOUT_SECONDS = 60.0


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def _ocr_endpoint(ocr_url: str) -> str:
    return f"{ocr_url.rstrip('/')}/ocr"


def _text_from_response(response: httpx.Response) -> str:
    if response.status_code != 200:
        logger.error("OCR service error: %s", response.status_code)
        raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")
    try:
        payload = response.json()
    except ValueError as exc:
        raise OCRServiceUnavailable("OCR service returned invalid JSON") from exc
    if not isinstance(payload, dict):
        raise OCRServiceUnavailable("OCR service returned an unexpected payload")
    return ocr_response_to_text(payload)


def call_ocr_service(image_path: Path, ocr_url: str) -> str:
    """
    Send a receipt image to the OCR service and return its recognized text.

    Raises:
        OCRServiceUnavailable: The service is unreachable or answered with an error.
    """
    endpoint = _ocr_endpoint(ocr_url)
    logger.info("Sending receipt to OCR service at %s...", endpoint)

    resized = resize_image_bytes(image_path.read_bytes())
    start_time = time.time()
    try:
        response = httpx.post(
            endpoint,
            files={"file": (image_path.name, resized, "image/jpeg")},
            timeout=OCR_TIMEOUT_SECONDS,
        )
    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e

    logger.info("OCR service returned in %.2f seconds", time.time() - start_time)
    return _text_from_response(response)


async def call_ocr_service_bytes_async(contents: bytes, filename: str, ocr_url: str) -> str:
    """Async variant of call_ocr_service for image bytes already in memory."""
    endpoint = _ocr_endpoint(ocr_url)
    resized = resize_image_bytes(contents)
    try:
        async with httpx.AsyncClient(timeout=OCR_TIMEOUT_SECONDS) as client:
            response = await client.post(endpoint, files={"file": (filename, resized, "image/jpeg")})
    except httpx.RequestError as e:
        logger.error("OCR service unavailable: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
    return _text_from_response(response)
