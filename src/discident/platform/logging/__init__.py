"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper and custom Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import DiscEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "DiscEventRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
