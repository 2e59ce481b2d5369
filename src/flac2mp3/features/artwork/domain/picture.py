"""
Summary: Embedded picture records, type labels and the selection priority table.
Why: Picture handling is driven by static tables rather than conditional chains.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal

PictureExtension = Literal["jpg", "png"]

# FLAC/ID3v2 picture type descriptions indexed by type code.
PICTURE_TYPE_DESCRIPTIONS: Final[tuple[str, ...]] = (
    "Other",
    "32x32 pixels 'file icon' (PNG only)",
    "Other file icon",
    "Cover (front)",
    "Cover (back)",
    "Leaflet page",
    "Media (e.g. label side of CD)",
    "Lead artist/lead performer/soloist",
    "Artist/performer",
    "Conductor",
    "Band/Orchestra",
    "Composer",
    "Lyricist/text writer",
    "Recording Location",
    "During recording",
    "During performance",
    "Movie/video screen capture",
    "A bright coloured fish",
    "Illustration",
    "Band/artist logotype",
    "Publisher/Studio logotype",
)

# Selection order, front cover first.
PICTURE_PRIORITY: Final[tuple[str, ...]] = (
    "COVER_FRONT",
    "OTHER",
    "ILLUSTRATION",
    "COVER_BACK",
    "LEAD_ARTIST_LEAD_PERFORMER_SOLOIST",
    "ARTIST_PERFORMER",
    "CONDUCTOR",
    "BAND_ORCHESTRA",
    "COMPOSER",
    "LYRICIST_TEXT_WRITER",
    "LEAFLET_PAGE",
    "MEDIA_E_G_LABEL_SIDE_OF_CD",
    "RECORDING_LOCATION",
    "DURING_RECORDING",
    "DURING_PERFORMANCE",
    "MOVIE_VIDEO_SCREEN_CAPTURE",
    "BAND_ARTIST_LOGOTYPE",
    "PUBLISHER_STUDIO_LOGOTYPE",
)

# Preferred first within one label.
EXTENSION_PREFERENCE: Final[tuple[PictureExtension, ...]] = ("png", "jpg")

_MIME_SUBTYPE_EXTENSIONS: Final[dict[str, PictureExtension]] = {
    "jpeg": "jpg",
    "jpg": "jpg",
    "png": "png",
}
_NON_ALNUM_RUN: Final[re.Pattern[str]] = re.compile(r"[^A-Z0-9]+")


@dataclass(frozen=True, slots=True)
class PictureBlock:
    """A raw PICTURE metadata block as read from the source file."""

    block_index: int
    type_code: int
    mime: str
    data: bytes


@dataclass(frozen=True, slots=True)
class EmbeddedPicture:
    """A picture block accepted for extraction."""

    block_index: int
    picture_type: str
    extension: PictureExtension
    content: bytes

    @property
    def file_name(self) -> str:
        return f"{self.picture_type}.{self.extension}"


def simplify_label(description: str) -> str:
    """Uppercase ``description`` and collapse non-alphanumeric runs to '_'."""

    return _NON_ALNUM_RUN.sub("_", description.upper()).strip("_")


def picture_type_label(type_code: int) -> str:
    """Return the simplified label of a picture type code."""

    if 0 <= type_code < len(PICTURE_TYPE_DESCRIPTIONS):
        return simplify_label(PICTURE_TYPE_DESCRIPTIONS[type_code])
    return "OTHER"


def extension_for_mime(mime: str) -> PictureExtension | None:
    """Map a declared MIME type to ``jpg``/``png``, or None if unsupported."""

    subtype = mime.strip().rpartition("/")[2].lower()
    return _MIME_SUBTYPE_EXTENSIONS.get(subtype)


__all__ = [
    "EXTENSION_PREFERENCE",
    "EmbeddedPicture",
    "PICTURE_PRIORITY",
    "PICTURE_TYPE_DESCRIPTIONS",
    "PictureBlock",
    "PictureExtension",
    "extension_for_mime",
    "picture_type_label",
    "simplify_label",
]
