"""Runtime infrastructure for receiptsplit.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings via get_config(), AppConfig
- Assignment-file loading via load_split_session()

The OCR client and HTTP server live in receiptsplit.runtime.ocr_client and
receiptsplit.runtime.receipt_server and are imported by full path.

Usage:
    from receiptsplit.runtime import get_logger, get_config

    logger = get_logger(__name__)
    config = get_config()
"""

from receiptsplit.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    level_from_name,
    set_log_level,
)
from receiptsplit.runtime.config import AppConfig, get_config, load_toml, reset_config
from receiptsplit.runtime.split_rules import AssignmentConfigError, build_split_session, load_split_session

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "level_from_name",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Config
    "AppConfig",
    "get_config",
    "load_toml",
    "reset_config",
    # Split assignments
    "AssignmentConfigError",
    "build_split_session",
    "load_split_session",
]
