"""
Summary: Transliterate raw tags and fill empty fields with default text.
Why: Path resolution and ID3 frames both need ASCII, non-empty values.
"""

from __future__ import annotations

import re
from typing import Final

from flac2mp3.features.naming.domain import transliterate
from flac2mp3.shared.track_metadata import TrackMetadata

FIELD_DEFAULTS: Final[dict[str, str]] = {
    "genre": "no genre",
    "artist": "no artist",
    "album": "no album",
    "track_number": "0",
    "title": "no title",
}

_LEADING_DIGITS: Final[re.Pattern[str]] = re.compile(r"\s*(\d+)")


def normalize_track_number(value: str) -> str:
    """Return the leading digits of ``value`` without zero padding, or ``""``.

    ``"3/12"`` becomes ``"3"``; text without leading digits becomes ``""``.
    """
    match = _LEADING_DIGITS.match(value)
    if match is None:
        return ""
    return match.group(1).lstrip("0")


def normalize_metadata(metadata: TrackMetadata) -> TrackMetadata:
    """Transliterate every field, then substitute defaults for empty ones."""

    values = {name: transliterate(getattr(metadata, name)).strip() for name in TrackMetadata.field_names()}
    values["track_number"] = normalize_track_number(values["track_number"])
    for name, default in FIELD_DEFAULTS.items():
        if not values[name]:
            values[name] = default
    return TrackMetadata(**values)


__all__ = ["FIELD_DEFAULTS", "normalize_metadata", "normalize_track_number"]
