"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper and Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import LOGGER_NAME, level_for_flags, logger, setup_logger
from .handlers import ConversionRichHandler

__all__ = [
    "LOGGER_NAME",
    "ConversionRichHandler",
    "level_for_flags",
    "logger",
    "setup_logger",
]
