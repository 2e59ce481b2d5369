"""
Summary: Verify one picture is chosen by type priority with PNG preferred.
Why: The encoder embeds exactly one picture per track.
"""

from __future__ import annotations

from pathlib import Path

from flac2mp3.features.artwork.domain import PICTURE_PRIORITY
from flac2mp3.features.artwork.usecases import PictureSelector


def _write(directory: Path, name: str, content: bytes = b"img") -> Path:
    path = directory / name
    _ = path.write_bytes(content)
    return path


def test_priority_table_has_eighteen_labels_front_cover_first() -> None:
    assert len(PICTURE_PRIORITY) == 18
    assert len(set(PICTURE_PRIORITY)) == 18
    assert PICTURE_PRIORITY[0] == "COVER_FRONT"
    assert PICTURE_PRIORITY[-1] == "PUBLISHER_STUDIO_LOGOTYPE"


def test_png_preferred_over_jpg_for_same_label(tmp_path: Path) -> None:
    _ = _write(tmp_path, "COVER_FRONT.jpg")
    png = _write(tmp_path, "COVER_FRONT.png")

    assert PictureSelector().select(tmp_path) == png


def test_higher_priority_label_wins_over_format(tmp_path: Path) -> None:
    jpg = _write(tmp_path, "COVER_FRONT.jpg")
    _ = _write(tmp_path, "OTHER.png")
    _ = _write(tmp_path, "ILLUSTRATION.png")

    assert PictureSelector().select(tmp_path) == jpg


def test_zero_byte_files_are_ignored(tmp_path: Path) -> None:
    _ = _write(tmp_path, "COVER_FRONT.png", b"")
    _ = _write(tmp_path, "COVER_FRONT.jpg", b"")
    back = _write(tmp_path, "COVER_BACK.jpg")

    selected = PictureSelector().select(tmp_path)

    assert selected == back
    assert selected.stat().st_size > 0


def test_unlisted_labels_are_never_selected(tmp_path: Path) -> None:
    _ = _write(tmp_path, "A_BRIGHT_COLOURED_FISH.png")
    _ = _write(tmp_path, "OTHER_FILE_ICON.png")
    _ = _write(tmp_path, "COVER_FRONT.gif")

    assert PictureSelector().select(tmp_path) is None


def test_empty_directory_has_no_picture(tmp_path: Path) -> None:
    assert PictureSelector().select(tmp_path) is None
