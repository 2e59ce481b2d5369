"""Summary: Ports defining how use cases read source-file metadata.
Why: Decouple tag and picture reading from mutagen so tests can use fakes."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from flac2mp3.features.artwork.domain.picture import PictureBlock


@runtime_checkable
class MetadataSourcePort(Protocol):
    """Port for reading tags and embedded picture blocks from a source file.

    Implementations raise ``MetadataReadError`` for unreadable files.
    """

    def read_tags(self, file_path: Path, keys: tuple[str, ...]) -> dict[str, str]:
        """Return the first value of each key present in ``file_path``."""
        ...

    def read_picture_blocks(self, file_path: Path) -> list[PictureBlock]:
        """Return the embedded picture blocks in metadata block order."""
        ...


__all__ = ["MetadataSourcePort"]
