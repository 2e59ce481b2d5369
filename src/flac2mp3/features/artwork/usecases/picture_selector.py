"""
Summary: Choose one extracted picture by the canonical type priority.
Why: Encoders embed a single picture; front covers should win.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from flac2mp3.features.artwork.domain import EXTENSION_PREFERENCE, PICTURE_PRIORITY


@final
class PictureSelector:
    """Select the highest-priority non-empty picture in a directory."""

    def __init__(
        self,
        priority: Sequence[str] = PICTURE_PRIORITY,
        extensions: Sequence[str] = EXTENSION_PREFERENCE,
    ) -> None:
        self.priority: tuple[str, ...] = tuple(priority)
        self.extensions: tuple[str, ...] = tuple(extensions)

    def select(self, scratch_dir: Path) -> Path | None:
        for label in self.priority:
            for extension in self.extensions:
                candidate = scratch_dir / f"{label}.{extension}"
                if _is_non_empty_file(candidate):
                    return candidate
        return None


def _is_non_empty_file(path: Path) -> bool:
    try:
        return path.is_file() and path.stat().st_size > 0
    except OSError:
        return False


__all__ = ["PictureSelector"]
