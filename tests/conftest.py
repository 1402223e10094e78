"""Shared pytest fixtures for receiptsplit tests."""

from __future__ import annotations

import pytest
from receiptsplit.runtime.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from any receiptsplit.toml or RECEIPTSPLIT_* settings on the host."""
    for name in ("RECEIPTSPLIT_OCR_URL", "RECEIPTSPLIT_HOST", "RECEIPTSPLIT_PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RECEIPTSPLIT_CONFIG", str(tmp_path / "missing.toml"))
    reset_config()
    yield
    reset_config()


SAMPLE_RECEIPT = """Milk 3.49
Bread 2.10
Member Savings -0.50
Subtotal 5.59
Tax 0.45
Total 6.04
"""


@pytest.fixture
def sample_receipt_text() -> str:
    return SAMPLE_RECEIPT
