"""
Summary: Write a source file's embedded JPEG/PNG pictures into scratch storage.
Why: The selector works on files named `<TYPE>.<ext>`, one per picture type.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from flac2mp3.features.artwork.domain import (
    EmbeddedPicture,
    PictureBlock,
    extension_for_mime,
    picture_type_label,
)
from flac2mp3.features.metadata.usecases.ports import MetadataSourcePort
from flac2mp3.platform.logging import logger
from flac2mp3.shared.errors import MetadataReadError
from flac2mp3.shared.events import ConversionEvent, log_event


@final
class PictureExtractor:
    """Extract embedded pictures of a source file."""

    def __init__(self, source: MetadataSourcePort) -> None:
        self.source: MetadataSourcePort = source

    def pictures(self, file_path: Path) -> list[EmbeddedPicture]:
        """Return the accepted pictures of ``file_path`` in block order.

        Blocks with a MIME type other than JPEG or PNG are logged and skipped.
        """
        try:
            blocks = self.source.read_picture_blocks(file_path)
        except MetadataReadError as exc:
            logger.debug("Unreadable picture blocks, extracting none: %s", exc)
            return []

        accepted: list[EmbeddedPicture] = []
        for block in blocks:
            picture = self._accept(file_path, block)
            if picture is not None:
                accepted.append(picture)
        return accepted

    def extract(self, file_path: Path, scratch_dir: Path) -> list[Path]:
        """Write the pictures of ``file_path`` into ``scratch_dir``.

        Pictures sharing a type overwrite each other; the last block wins.

        Returns:
            list[Path]: Distinct written files, in first-written order.
        """
        written: list[Path] = []
        for picture in self.pictures(file_path):
            target = scratch_dir / picture.file_name
            _ = target.write_bytes(picture.content)
            logger.debug(
                "Extracted picture block %d as %s (%d bytes)",
                picture.block_index,
                target.name,
                len(picture.content),
            )
            if target not in written:
                written.append(target)
        return written

    @staticmethod
    def _accept(file_path: Path, block: PictureBlock) -> EmbeddedPicture | None:
        extension = extension_for_mime(block.mime)
        if extension is None:
            log_event(
                logging.WARNING,
                ConversionEvent.PICTURE_SKIP,
                "Unsupported picture format %r in block %d of %s",
                block.mime,
                block.block_index,
                file_path,
                source_path=file_path,
                error_message=f"unsupported format {block.mime or 'unknown'!r}",
            )
            return None
        return EmbeddedPicture(
            block_index=block.block_index,
            picture_type=picture_type_label(block.type_code),
            extension=extension,
            content=block.data,
        )


__all__ = ["PictureExtractor"]
