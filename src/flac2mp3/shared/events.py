"""
Summary: Structured conversion event identifiers and their log emitter.
Why: The console handler styles records by event, so every feature logs through one helper.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from flac2mp3.platform.logging import logger


class ConversionEvent(StrEnum):
    """Structured event identifiers for conversion logs."""

    BATCH_START = "conversion.batch.start"
    BATCH_COMPLETE = "conversion.batch.complete"
    JOB_START = "conversion.job.start"
    JOB_SUCCESS = "conversion.job.success"
    JOB_SKIP_MISSING = "conversion.job.skip.missing"
    JOB_ERROR = "conversion.job.error"
    PICTURE_SKIP = "conversion.picture.skip"


def log_event(
    level: int,
    event: ConversionEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` tagged with ``event``; ``context`` becomes record extras."""

    extra: dict[str, Any] = {"conversion_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["ConversionEvent", "log_event"]
