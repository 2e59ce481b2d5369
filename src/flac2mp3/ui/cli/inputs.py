"""
Summary: Source path readers for NUL-separated streams and M3U playlists.
Why: Paths may contain any character but NUL, so stdin is never split on newlines.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Final

_CHUNK_SIZE: Final[int] = 64 * 1024
_FLAC_ENTRY: Final[re.Pattern[str]] = re.compile(r"\.flac", re.IGNORECASE)
_FILE_URI_PREFIX: Final[str] = "file://"
_COMMENT_PREFIX: Final[str] = "#"


def read_null_separated(stream: BinaryIO) -> Iterator[Path]:
    """Yield paths from a NUL-separated byte stream, skipping empty entries."""

    buffer = b""
    while chunk := stream.read(_CHUNK_SIZE):
        buffer += chunk
        *entries, buffer = buffer.split(b"\0")
        for entry in entries:
            if entry:
                yield Path(os.fsdecode(entry))
    if buffer:
        yield Path(os.fsdecode(buffer))


def parse_m3u_line(line: str) -> Path | None:
    """Return the FLAC path named by an M3U line, or None for other lines."""

    entry = line.strip()
    if not entry or entry.startswith(_COMMENT_PREFIX) or not _FLAC_ENTRY.search(entry):
        return None
    if entry.startswith(_FILE_URI_PREFIX):
        entry = entry[len(_FILE_URI_PREFIX):]
    return Path(entry)


def read_m3u_sources(playlist: Path) -> list[Path]:
    """Return the FLAC entries of an M3U playlist in file order."""

    with open(playlist, encoding="utf-8", errors="surrogateescape") as f:
        return [path for line in f if (path := parse_m3u_line(line)) is not None]


__all__ = ["parse_m3u_line", "read_m3u_sources", "read_null_separated"]
