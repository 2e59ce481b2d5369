"""
Summary: Combine normalized metadata into the target directory and file name.
Why: Keep the layout rule `<artist>/<album>/<NNN>_<title>.mp3` in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, final

from flac2mp3.features.naming.domain import slugify
from flac2mp3.shared.errors import PathResolutionError
from flac2mp3.shared.track_metadata import TrackMetadata


@final
@dataclass(frozen=True, slots=True)
class TargetPath:
    """Relative location of one converted track."""

    artist_slug: str
    album_slug: str
    basename: str

    @property
    def subdirectory(self) -> str:
        return f"{self.artist_slug}/{self.album_slug}/"

    @property
    def relative_path(self) -> Path:
        return Path(self.artist_slug, self.album_slug, self.basename)

    def under(self, root: Path) -> Path:
        return root / self.relative_path


@final
class PathResolver:
    """Resolve a TargetPath from normalized TrackMetadata."""

    EXTENSION: ClassVar[str] = ".mp3"

    def resolve(self, metadata: TrackMetadata) -> TargetPath:
        """Build the target path for ``metadata``.

        Raises:
            PathResolutionError: If artist, album or title slugs are empty, or
                the track number is not a non-negative integer.
        """
        artist_slug = self._require_slug("artist", metadata.artist)
        album_slug = self._require_slug("album", metadata.album)
        title_slug = self._require_slug("title", metadata.title)

        if not metadata.track_number.isdecimal():
            raise PathResolutionError("track_number", metadata.track_number)
        track = int(metadata.track_number)

        return TargetPath(
            artist_slug=artist_slug,
            album_slug=album_slug,
            basename=f"{track:03d}_{title_slug}{self.EXTENSION}",
        )

    @staticmethod
    def _require_slug(field: str, value: str) -> str:
        slug = slugify(value)
        if not slug:
            raise PathResolutionError(field, value)
        return slug


__all__ = ["PathResolver", "TargetPath"]
