"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
Every record carries a timestamp, which is what the scheduled broadcast
relies on to correlate runs.
"""

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_initialized = False

# python-telegram-bot logs every Bot API request through httpx at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _init_logging() -> None:
    """Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    _apply_level(root, os.getenv("LOG_LEVEL", "INFO"))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _initialized = True


def _apply_level(logger: logging.Logger, level: str) -> None:
    try:
        logger.setLevel(level.upper())
    except ValueError:
        logger.setLevel(logging.INFO)
        logger.warning(f"Unknown log level {level!r}, using INFO")


def set_level(level: str) -> None:
    """Change the root logging level after startup (e.g. from Settings.log_level)."""
    _init_logging()
    _apply_level(logging.getLogger(), level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
