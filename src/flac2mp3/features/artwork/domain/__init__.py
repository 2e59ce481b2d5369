"""Artwork domain: picture records and priority tables."""

from .picture import (
    EXTENSION_PREFERENCE,
    PICTURE_PRIORITY,
    PICTURE_TYPE_DESCRIPTIONS,
    EmbeddedPicture,
    PictureBlock,
    extension_for_mime,
    picture_type_label,
    simplify_label,
)

__all__ = [
    "EXTENSION_PREFERENCE",
    "EmbeddedPicture",
    "PICTURE_PRIORITY",
    "PICTURE_TYPE_DESCRIPTIONS",
    "PictureBlock",
    "extension_for_mime",
    "picture_type_label",
    "simplify_label",
]
