"""
Summary: Verify transliteration plus default substitution of raw metadata.
Why: Every later stage relies on ASCII, non-empty naming fields.
"""

from __future__ import annotations

import pytest

from flac2mp3.features.conversion.usecases import (
    FIELD_DEFAULTS,
    normalize_metadata,
    normalize_track_number,
)
from flac2mp3.shared.track_metadata import TrackMetadata


def test_empty_metadata_receives_defaults() -> None:
    normalized = normalize_metadata(TrackMetadata())

    assert normalized == TrackMetadata(
        genre="no genre",
        artist="no artist",
        album="no album",
        year="",
        track_number="0",
        title="no title",
    )
    assert set(FIELD_DEFAULTS) == {"genre", "artist", "album", "track_number", "title"}


def test_fields_are_transliterated_before_defaults() -> None:
    normalized = normalize_metadata(
        TrackMetadata(artist="Café Müller", album="東京", title="\U000f0000", track_number="7", year="1999")
    )

    assert normalized.artist == "Cafe Mueller"
    assert normalized.album.isascii() and normalized.album
    assert normalized.title == "no title"
    assert normalized.track_number == "7"
    assert normalized.year == "1999"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("7", "7"),
        ("07", "7"),
        ("3/12", "3"),
        (" 12 ", "12"),
        ("0", ""),
        ("abc", ""),
        ("", ""),
        ("A1", ""),
    ],
)
def test_normalize_track_number(raw: str, expected: str) -> None:
    assert normalize_track_number(raw) == expected


def test_non_numeric_track_number_defaults_to_zero() -> None:
    assert normalize_metadata(TrackMetadata(track_number="side A")).track_number == "0"
