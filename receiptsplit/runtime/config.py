"""Application settings: defaults, then an optional TOML file, then environment.

Example receiptsplit.toml:

    ocr_url = "http://localhost:8001"

    [server]
    host = "127.0.0.1"
    port = 8080

    [logging]
    level = "DEBUG"

Environment variables:
    RECEIPTSPLIT_CONFIG: Path to the TOML file. Default: ./receiptsplit.toml
    RECEIPTSPLIT_OCR_URL, RECEIPTSPLIT_HOST, RECEIPTSPLIT_PORT: Override file values
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_PATH_ENV = "RECEIPTSPLIT_CONFIG"
DEFAULT_CONFIG_FILENAME = "receiptsplit.toml"


def load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@dataclass(frozen=True)
class AppConfig:
    """Resolved settings for the CLI and HTTP server."""

    ocr_url: str = "http://localhost:8001"
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str | None = None


def build_config(file_data: Mapping[str, Any] | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge TOML data and environment variables over the defaults."""
    file_data = file_data or {}
    environ = os.environ if environ is None else environ
    defaults = AppConfig()

    server = file_data.get("server") or {}
    logging_section = file_data.get("logging") or {}

    ocr_url = environ.get("RECEIPTSPLIT_OCR_URL") or file_data.get("ocr_url") or defaults.ocr_url
    host = environ.get("RECEIPTSPLIT_HOST") or server.get("host") or defaults.host
    port_value = environ.get("RECEIPTSPLIT_PORT") or server.get("port") or defaults.port
    try:
        port = int(port_value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid port setting: {port_value!r}") from exc

    return AppConfig(
        ocr_url=str(ocr_url).rstrip("/"),
        host=str(host),
        port=port,
        log_level=logging_section.get("level"),
    )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the process-wide AppConfig, loading it on first use."""
    global _config
    if _config is None:
        path = Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_FILENAME)).expanduser()
        _config = build_config(load_toml(path))
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
