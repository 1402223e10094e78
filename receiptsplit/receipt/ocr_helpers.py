"""Pure helpers around the external OCR service: image prep and text assembly."""

import io
from typing import Any

MAX_IMAGE_DIMENSION = 3000  # Downscale if either side exceeds this
OCR_IMAGE_PADDING = 50  # White border so OCR does not clip edge text
MIN_DETECTION_CONFIDENCE = 0.5


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Prepare a receipt photo for OCR.

    Applies EXIF orientation, shrinks the image so neither side exceeds
    max_dimension, and pads it with a white border.

    Returns:
        JPEG bytes
    """
    from PIL import Image, ImageOps

    img = ImageOps.exif_transpose(Image.open(io.BytesIO(image_bytes)))

    width, height = img.size
    scale = max_dimension / max(width, height)
    if scale < 1:
        img = img.resize((int(width * scale), int(height * scale)), Image.Resampling.LANCZOS)

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def _detection_rows(detections: list[Any], min_confidence: float) -> list[list[dict[str, Any]]]:
    """Group OCR detections into visual rows by overlapping vertical extent."""
    boxes: list[dict[str, Any]] = []
    for bbox, (text, confidence) in detections:
        if confidence < min_confidence or not str(text).strip():
            continue
        ys = [point[1] for point in bbox]
        boxes.append(
            {
                "text": str(text).strip(),
                "min_x": min(point[0] for point in bbox),
                "y_min": min(ys),
                "y_max": max(ys),
                "center_y": sum(ys) / len(ys),
            }
        )

    boxes.sort(key=lambda b: (b["center_y"], b["min_x"]))

    rows: list[list[dict[str, Any]]] = []
    for box in boxes:
        if rows:
            row = rows[-1]
            row_min = min(b["y_min"] for b in row)
            row_max = max(b["y_max"] for b in row)
            # Same row when this box's centre falls inside the row's span.
            if row_min <= box["center_y"] <= row_max:
                row.append(box)
                continue
        rows.append([box])

    for row in rows:
        row.sort(key=lambda b: b["min_x"])
    return rows


def ocr_response_to_text(result: dict[str, Any], min_confidence: float = MIN_DETECTION_CONFIDENCE) -> str:
    """
    Extract plain multi-line text from an OCR service response.

    Supports services that return the text directly ("full_text" or "text")
    and PaddleOCR-style services returning
    {"detections": [[bbox, [text, confidence]], ...]}.
    """
    for key in ("full_text", "text"):
        value = result.get(key)
        if isinstance(value, str):
            return value

    detections = result.get("detections") or []
    rows = _detection_rows(detections, min_confidence)
    return "\n".join(" ".join(b["text"] for b in row) for row in rows)
