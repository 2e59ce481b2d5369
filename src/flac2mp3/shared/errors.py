"""
Summary: Exception hierarchy for conversion failures.
Why: Let the orchestrator tell per-job recoverable failures apart from bugs.
"""

from __future__ import annotations

from collections.abc import Sequence


class Flac2Mp3Error(Exception):
    """Base class for all flac2mp3 errors."""


class MetadataReadError(Flac2Mp3Error):
    """Raised when a source file's metadata blocks cannot be parsed."""


class PathResolutionError(Flac2Mp3Error):
    """Raised when normalized metadata cannot form a target path."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Cannot build a path component from {field}={value!r}")
        self.field: str = field
        self.value: str = value


class CodecError(Flac2Mp3Error):
    """Raised when an external decoder or encoder fails."""

    def __init__(self, command: Sequence[str], message: str, stderr: str = "") -> None:
        super().__init__(f"{command[0] if command else '?'}: {message}")
        self.command: tuple[str, ...] = tuple(command)
        self.stderr: str = stderr


__all__ = ["Flac2Mp3Error", "MetadataReadError", "PathResolutionError", "CodecError"]
