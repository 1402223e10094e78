"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from receiptsplit.application.receipts import scan as scan_workflow
from receiptsplit.cli.main import main
from receiptsplit.runtime.ocr_client import OCRServiceUnavailable


@pytest.fixture
def receipt_file(tmp_path: Path, sample_receipt_text: str) -> Path:
    path = tmp_path / "receipt.txt"
    path.write_text(sample_receipt_text, encoding="utf-8")
    return path


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "Commands:" in capsys.readouterr().out


def test_parse_file(receipt_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(receipt_file)]) == 0
    out = capsys.readouterr().out
    assert "1. Milk - $3.49" in out
    assert "Total: $6.04" in out


def test_parse_json_output(receipt_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(receipt_file), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["totals"]["subtotal"] == 5.59
    assert len(data["items"]) == 2


def test_parse_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("Bananas\n2.99\n"))
    assert main(["parse"]) == 0
    assert "1. Bananas - $2.99" in capsys.readouterr().out


def test_parse_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(tmp_path / "missing.txt")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_split_command(receipt_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assignments = tmp_path / "split.toml"
    assignments.write_text(
        'people = ["Alice", "Bob"]\n\n'
        '[[assign]]\nitem = "Bread"\npeople = ["Alice", "Bob"]\n\n'
        '[[assign]]\nitem = 1\npeople = ["Bob"]\n',
        encoding="utf-8",
    )

    assert main(["split", str(receipt_file), str(assignments)]) == 0
    out = capsys.readouterr().out
    assert "Alice: $1.05" in out
    assert "Bob: $4.54" in out


def test_split_invalid_assignments(receipt_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assignments = tmp_path / "split.toml"
    assignments.write_text('people = ["Alice"]\n\n[[assign]]\nitem = 9\npeople = ["Alice"]\n', encoding="utf-8")

    assert main(["split", str(receipt_file), str(assignments)]) == 1
    assert "out of range" in capsys.readouterr().out


def test_split_malformed_toml(receipt_file: Path, tmp_path: Path) -> None:
    assignments = tmp_path / "split.toml"
    assignments.write_text("people = [", encoding="utf-8")

    assert main(["split", str(receipt_file), str(assignments)]) == 1


def test_scan_uses_ocr_text(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"jpeg")
    seen: dict[str, str] = {}

    def fake_ocr(image_path: Path, ocr_url: str) -> str:
        seen["url"] = ocr_url
        return "Eggs 4.99\nTotal 4.99"

    monkeypatch.setattr(scan_workflow, "call_ocr_service", fake_ocr)

    assert main(["scan", str(image), "--ocr-url", "http://ocr.test"]) == 0
    out = capsys.readouterr().out
    assert "1. Eggs - $4.99" in out
    assert seen["url"] == "http://ocr.test"


def test_scan_defaults_to_configured_ocr_url(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"jpeg")
    monkeypatch.setenv("RECEIPTSPLIT_OCR_URL", "http://configured:9000")
    seen: dict[str, str] = {}

    def fake_ocr(image_path: Path, ocr_url: str) -> str:
        seen["url"] = ocr_url
        return ""

    monkeypatch.setattr(scan_workflow, "call_ocr_service", fake_ocr)

    assert main(["scan", str(image)]) == 0
    assert seen["url"] == "http://configured:9000"
    assert "Items (0):" in capsys.readouterr().out


def test_scan_ocr_unavailable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"jpeg")

    def fake_ocr(image_path: Path, ocr_url: str) -> str:
        raise OCRServiceUnavailable("Failed to connect to OCR service")

    monkeypatch.setattr(scan_workflow, "call_ocr_service", fake_ocr)

    assert main(["scan", str(image)]) == 1
    assert "OCR service unavailable" in capsys.readouterr().out


def test_scan_missing_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", str(tmp_path / "none.jpg")]) == 1
    assert "Receipt file not found" in capsys.readouterr().out


def test_scan_unreadable_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_text("Milk 3.49\n", encoding="utf-8")

    assert main(["scan", str(image), "--ocr-url", "http://ocr.test"]) == 1
    assert "Cannot read receipt image" in capsys.readouterr().out
