"""
Summary: Filesystem helpers and the scoped scratch area.
Why: Guarantee scratch storage is released on every exit path and never shared between jobs.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType

from flac2mp3.platform.logging import logger


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and any missing parents, returning it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def clear_files(directory: Path) -> None:
    """Delete the top-level regular files of ``directory``, best-effort."""

    try:
        entries = list(directory.iterdir())
    except OSError:
        return
    for entry in entries:
        try:
            if entry.is_file() and not entry.is_symlink():
                entry.unlink()
        except OSError as exc:
            logger.debug("Could not remove scratch file %s: %s", entry, exc)


class ScratchArea:
    """Batch-scoped temporary directory handing out one directory per job.

    Use as a context manager; the whole area is removed on exit, whether
    processing finished normally, raised, or was interrupted.
    """

    def __init__(self, prefix: str = "flac2mp3-", parent: Path | None = None) -> None:
        self.prefix: str = prefix
        self.parent: Path | None = parent
        self._root: Path | None = None

    @property
    def root(self) -> Path:
        if self._root is None:
            raise RuntimeError("Scratch area is not active")
        return self._root

    def __enter__(self) -> "ScratchArea":
        self._root = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.parent))
        logger.debug("Scratch area created at %s", self._root)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._root is None:
            return
        shutil.rmtree(self._root, ignore_errors=True)
        logger.debug("Scratch area removed: %s", self._root)
        self._root = None

    @contextmanager
    def job_directory(self) -> Iterator[Path]:
        """Yield a fresh, uniquely named directory removed when the job ends."""

        path = Path(tempfile.mkdtemp(prefix="job-", dir=self.root))
        try:
            yield path
        finally:
            clear_files(path)
            shutil.rmtree(path, ignore_errors=True)


__all__ = ["ScratchArea", "clear_files", "ensure_directory"]
