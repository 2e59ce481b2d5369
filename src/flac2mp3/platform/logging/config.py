"""Logger bootstrap for conversion runs.

Where: platform/logging/config.py
What: Attach the Rich console handler, and optionally a rotating file, to the ``flac2mp3`` logger.
Why: Modules log through one named logger; the CLI decides where records go once flags are parsed.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import ConversionRichHandler


LOGGER_NAME: Final[str] = "flac2mp3"
LOG_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(conversion_event)s %(message)s"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

# Handlers are attached by setup_logger(); until then only warnings reach
# stderr through logging's last-resort handler.
logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


def level_for_flags(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the ``--verbose``/``--quiet`` flags to a console threshold."""

    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _file_handler(log_file: Path) -> logging.Handler:
    path = log_file.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, defaults={"conversion_event": "-"}))
    return handler


def setup_logger(
    *,
    console_level: int = logging.INFO,
    log_file: Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Route ``flac2mp3`` records to a Rich console and an optional log file.

    Calling again replaces the handlers of an earlier call. The file, when
    given, always records DEBUG and above regardless of ``console_level``.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)

    rich_handler = ConversionRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    rich_handler.setLevel(console_level)
    logger.addHandler(rich_handler)

    if log_file is not None:
        logger.addHandler(_file_handler(log_file))

    return logger


__all__ = [
    "LOGGER_NAME",
    "level_for_flags",
    "logger",
    "setup_logger",
]
