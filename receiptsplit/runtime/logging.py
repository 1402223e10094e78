"""Centralized logging configuration for receiptsplit.

Usage:
    from receiptsplit.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Per-line parser decisions")
    logger.info("General info")

Environment variables:
    RECEIPTSPLIT_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO
"""

import logging
import os
import sys

LOGGER_NAMESPACE = "receiptsplit"
LOG_LEVEL_ENV = "RECEIPTSPLIT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


def level_from_name(name: str | None, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Map a level name such as "debug" to its logging constant."""
    return _LEVELS.get((name or "").strip().upper(), default)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the receiptsplit logger namespace, once.

    Args:
        level: Log level to use. If None, reads RECEIPTSPLIT_LOG_LEVEL or
               falls back to DEFAULT_LOG_LEVEL.
    """
    global _handler

    if _handler is not None:
        return

    if level is None:
        level = level_from_name(os.environ.get(LOG_LEVEL_ENV))

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter_for(level))

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(level)
    root_logger.addHandler(_handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name, typically __name__."""
    configure_logging()
    if name == LOGGER_NAMESPACE or name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the log level at runtime, switching format to/from DEBUG."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setFormatter(_formatter_for(level))
