"""
Summary: Mutagen-backed reader for FLAC Vorbis comments and PICTURE blocks.
Why: Keep mutagen behind the metadata source port so use cases stay testable.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from mutagen import MutagenError
from mutagen.flac import FLAC, Picture

from flac2mp3.features.artwork.domain.picture import PictureBlock
from flac2mp3.shared.errors import MetadataReadError


@final
class MutagenFlacSource:
    """Read tags and embedded pictures from FLAC files."""

    FILE_CLASS: ClassVar[type[FLAC]] = FLAC

    def _open(self, file_path: Path) -> FLAC:
        try:
            return self.FILE_CLASS(file_path)
        except (MutagenError, OSError) as exc:
            raise MetadataReadError(f"{file_path}: {exc}") from exc

    def read_tags(self, file_path: Path, keys: tuple[str, ...]) -> dict[str, str]:
        """Return the first value of each of ``keys`` present in the comments."""

        audio = self._open(file_path)
        tags = audio.tags
        if tags is None:
            return {}

        result: dict[str, str] = {}
        for key in keys:
            values = tags.get(key)
            if values:
                result[key] = str(values[0])
        return result

    def read_picture_blocks(self, file_path: Path) -> list[PictureBlock]:
        """Return every PICTURE block with its index in the metadata block list."""

        audio = self._open(file_path)
        return [
            PictureBlock(
                block_index=index,
                type_code=int(block.type),
                mime=block.mime or "",
                data=bytes(block.data),
            )
            for index, block in enumerate(audio.metadata_blocks)
            if isinstance(block, Picture)
        ]


__all__ = ["MutagenFlacSource"]
