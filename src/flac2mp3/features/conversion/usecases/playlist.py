"""Append-only M3U playlist of converted files."""

from __future__ import annotations

from pathlib import Path
from typing import final


@final
class PlaylistWriter:
    """Append one output path per line to an M3U file."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def append(self, entry: Path | str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            _ = f.write(f"{entry}\n")

    def count(self) -> int:
        """Return the number of entries, ignoring blank lines and comments."""
        if not self.path.exists():
            return 0
        with open(self.path, encoding="utf-8") as f:
            return sum(1 for line in f if line.strip() and not line.startswith("#"))


__all__ = ["PlaylistWriter"]
