"""Rich console handler for conversion logs.

Where: platform/logging/handlers.py
What: Render structured conversion events with icons, colors and compact paths.
Why: Keep per-file progress readable on the error stream during long batches.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ConversionRichHandler(RichHandler):
    """Rich handler that styles conversion events and file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "conversion.batch.start": ("🚀", "cyan"),
        "conversion.batch.complete": ("✅", "green"),
        "conversion.job.start": ("🎧", "blue"),
        "conversion.job.success": ("🎉", "green"),
        "conversion.job.skip.missing": ("↪️", "yellow"),
        "conversion.job.error": ("⛔", "red"),
        "conversion.picture.skip": ("🖼️", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "conversion.job.start": "Converting ",
        "conversion.job.success": "Converted ",
        "conversion.job.skip.missing": "Skipped missing ",
        "conversion.job.error": "Failed ",
        "conversion.picture.skip": "Skipped picture in ",
    }
    _LEVEL_STYLES: ClassVar[dict[int, tuple[str, Style]]] = {
        logging.DEBUG: ("debug", Style(dim=True, bold=True)),
        logging.INFO: ("info", Style(color="blue", bold=True)),
        logging.WARNING: ("warn", Style(color="yellow", bold=True)),
        logging.ERROR: ("fail", Style(color="red", bold=True)),
        logging.CRITICAL: ("fail", Style(color="red", bold=True, reverse=True)),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # Level prefixes are rendered in render_message
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators and ellipsis truncation."""

        pure_path: PurePath = PurePosixPath(path)
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor if anchor and not truncated else ""
        if truncated:
            display_string += "…/"
        display_string += "/".join(body_parts)
        return self._style_path_string(display_string or ".")

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {"/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_level_prefix(self, record: logging.LogRecord) -> Text:
        level = max(
            (threshold for threshold in self._LEVEL_STYLES if threshold <= record.levelno),
            default=logging.DEBUG,
        )
        label, style = self._LEVEL_STYLES[level]
        return Text(f"[{label}] ", style=style)

    def _render_conversion_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured conversion events with dedicated styling."""

        event = getattr(record, "conversion_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = self._render_level_prefix(record)
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("conversion.batch"):
            if event == "conversion.batch.start":
                _ = body.append("Batch start")
                output_root = getattr(record, "output_root", None)
                if output_root:
                    _ = body.append(" → ")
                    _ = body.append_text(self._format_path(str(output_root)))
            else:
                _ = body.append("Batch complete")
                metrics: list[str] = []
                for key in ("converted", "skipped", "failed"):
                    value = getattr(record, key, None)
                    if isinstance(value, int):
                        metrics.append(f"{key}={value}")
                duration = getattr(record, "duration_seconds", None)
                if isinstance(duration, (int, float)):
                    metrics.append(f"duration={duration:.2f}s")
                if metrics:
                    _ = body.append(" [" + ", ".join(metrics) + "]")
            _ = text.append_text(body)
            return text

        sequence = getattr(record, "sequence", None)
        if isinstance(sequence, int) and sequence > 0:
            _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        else:
            _ = body.append(message)

        target_path = getattr(record, "target_path", None)
        if event == "conversion.job.success" and target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        error_message = getattr(record, "error_message", None)
        if error_message and event in {"conversion.job.error", "conversion.picture.skip"}:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with event styling, or a plain severity prefix."""

        conversion_text = self._render_conversion_message(record, message)
        if conversion_text is not None:
            return conversion_text

        text = self._render_level_prefix(record)
        _ = text.append(message)
        return text


__all__ = ["ConversionRichHandler"]
