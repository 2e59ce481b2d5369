"""Summary: Ports for the external decode and encode collaborators.
Why: The orchestrator runs against fakes in tests and codec binaries in production."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class DecoderPort(Protocol):
    """Decode a source file to raw 44.1 kHz, 24-bit LE, stereo PCM."""

    def decode(self, source: Path, destination: Path) -> None:
        """Write the decoded PCM of ``source`` to ``destination``.

        Raises ``CodecError`` on failure.
        """
        ...


@runtime_checkable
class EncoderPort(Protocol):
    """Encode raw PCM to a compressed, tagged output file."""

    def encode(
        self,
        pcm: Path,
        destination: Path,
        tags: Mapping[str, str],
        picture: Path | None,
    ) -> None:
        """Write ``destination`` with ``tags`` and the optional ``picture``.

        Raises ``CodecError`` on failure.
        """
        ...


@runtime_checkable
class PlaylistPort(Protocol):
    """Append-only playlist sink."""

    def append(self, entry: Path | str) -> None:
        ...


__all__ = ["DecoderPort", "EncoderPort", "PlaylistPort"]
