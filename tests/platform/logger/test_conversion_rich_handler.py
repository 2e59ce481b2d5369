"""Tests for the ``ConversionRichHandler`` rendering of conversion events."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from flac2mp3.platform.logging import ConversionRichHandler


def _make_handler() -> ConversionRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ConversionRichHandler(console=console)


def _build_record(level: int = logging.INFO, msg: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="flac2mp3",
        level=level,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_source_paths() -> None:
    """Deep source paths keep only their trailing segments."""

    handler = _make_handler()
    record = _build_record(
        conversion_event="conversion.job.start",
        sequence=2,
        source_path="/home/user/music/rips/Artist/Album/01 Song.flac",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert plain.startswith("[info] ")
    assert "[2] Converting " in plain
    assert "…/rips/Artist/Album/01 Song.flac" in plain
    assert "/home/user" not in plain


def test_render_message_shows_target_on_success() -> None:
    handler = _make_handler()
    record = _build_record(
        conversion_event="conversion.job.success",
        sequence=1,
        source_path="in.flac",
        target_path="a/b/001_c.mp3",
    )

    plain = handler.render_message(record, "").plain

    assert "Converted in.flac → a/b/001_c.mp3" in plain


def test_render_message_appends_error_details() -> None:
    handler = _make_handler()
    record = _build_record(
        logging.ERROR,
        conversion_event="conversion.job.error",
        source_path="broken.flac",
        error_message="ffmpeg: exited with status 1",
    )

    plain = handler.render_message(record, "").plain

    assert plain.startswith("[fail] ")
    assert "Failed broken.flac (ffmpeg: exited with status 1)" in plain


def test_render_message_formats_batch_metrics() -> None:
    handler = _make_handler()
    record = _build_record(
        conversion_event="conversion.batch.complete",
        converted=3,
        skipped=1,
        failed=0,
        duration_seconds=1.5,
    )

    plain = handler.render_message(record, "").plain

    assert "Batch complete [converted=3, skipped=1, failed=0, duration=1.50s]" in plain


def test_render_message_plain_records_get_level_prefix() -> None:
    """Records without a conversion event fall back to a severity prefix."""

    handler = _make_handler()

    warning = handler.render_message(_build_record(logging.WARNING), "careful")
    debug = handler.render_message(_build_record(logging.DEBUG), "details")

    assert isinstance(warning, Text) and warning.plain == "[warn] careful"
    assert isinstance(debug, Text) and debug.plain == "[debug] details"


def test_render_message_uses_message_without_source_path() -> None:
    handler = _make_handler()
    record = _build_record(conversion_event="conversion.job.start")

    plain = handler.render_message(record, "Converting something").plain

    assert plain.endswith("Converting Converting something")


def test_render_message_critical_records_use_fail_prefix() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(logging.CRITICAL), "fatal")

    assert isinstance(rendered, Text) and rendered.plain == "[fail] fatal"
