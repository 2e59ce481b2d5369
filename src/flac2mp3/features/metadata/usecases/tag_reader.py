"""Tag extraction for source files.

Where: features/metadata/usecases/tag_reader.py
What: Read the six tag fields used for naming and tagging into TrackMetadata.
Why: Unreadable files degrade to empty metadata instead of failing the job.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from flac2mp3.platform.logging import logger
from flac2mp3.shared.errors import MetadataReadError
from flac2mp3.shared.track_metadata import TrackMetadata

from .ports import MetadataSourcePort


@final
class TagReader:
    """Extract TrackMetadata from a source file's Vorbis comments."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "genre": "GENRE",
        "artist": "ARTIST",
        "album": "ALBUM",
        "year": "DATE",
        "track_number": "TRACKNUMBER",
        "title": "TITLE",
    }

    def __init__(self, source: MetadataSourcePort) -> None:
        self.source: MetadataSourcePort = source

    def read(self, file_path: Path) -> TrackMetadata:
        """Read metadata from ``file_path``.

        Missing keys yield empty fields and an unreadable file yields an
        all-empty TrackMetadata. TRACKNUMBER has its leading zeros stripped.
        """
        try:
            raw = self.source.read_tags(file_path, tuple(self.TAG_MAPPING.values()))
        except MetadataReadError as exc:
            logger.debug("Unreadable tags, using empty metadata: %s", exc)
            return TrackMetadata()

        values = {field: raw.get(key, "") for field, key in self.TAG_MAPPING.items()}
        values["track_number"] = values["track_number"].strip().lstrip("0")
        return TrackMetadata(**values)


__all__ = ["TagReader"]
