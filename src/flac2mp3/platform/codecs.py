"""
Summary: Subprocess adapters for the external PCM decoder and MP3 encoder.
Why: Codec work stays in dedicated binaries; failures surface as CodecError.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import ClassVar, Final, final

from flac2mp3.platform.logging import logger
from flac2mp3.shared.errors import CodecError

# Intermediate PCM layout shared by decoder and encoder.
PCM_SAMPLE_RATE: Final[int] = 44100
PCM_BIT_DEPTH: Final[int] = 24
PCM_CHANNELS: Final[int] = 2

_STDERR_TAIL: Final[int] = 2000


def run_codec(command: Sequence[str]) -> None:
    """Run an external codec command, raising CodecError on failure."""

    logger.debug("Running %s", " ".join(command))
    try:
        _ = subprocess.run(
            list(command),
            check=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise CodecError(command, "executable not found") from exc
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or b"").decode(errors="replace")[-_STDERR_TAIL:]
        raise CodecError(command, f"exited with status {exc.returncode}", stderr) from exc


@final
class FfmpegDecoder:
    """Decode a source file to raw signed 24-bit little-endian stereo PCM."""

    def __init__(self, command: str = "ffmpeg") -> None:
        self.command: str = command

    def build_command(self, source: Path, destination: Path) -> list[str]:
        return [
            self.command,
            "-nostdin",
            "-v", "error",
            "-y",
            "-i", str(source),
            "-vn",
            "-acodec", f"pcm_s{PCM_BIT_DEPTH}le",
            "-f", f"s{PCM_BIT_DEPTH}le",
            "-ar", str(PCM_SAMPLE_RATE),
            "-ac", str(PCM_CHANNELS),
            str(destination),
        ]

    def decode(self, source: Path, destination: Path) -> None:
        run_codec(self.build_command(source, destination))


@final
class LameEncoder:
    """Encode raw PCM to a VBR MP3 carrying ID3 tags and optional artwork."""

    TAG_OPTIONS: ClassVar[dict[str, str]] = {
        "title": "--tt",
        "artist": "--ta",
        "album": "--tl",
        "year": "--ty",
        "track_number": "--tn",
        "genre": "--tg",
    }

    def __init__(self, command: str = "lame", vbr_quality: int = 2) -> None:
        self.command: str = command
        self.vbr_quality: int = vbr_quality

    def build_command(
        self,
        pcm: Path,
        destination: Path,
        tags: Mapping[str, str],
        picture: Path | None,
    ) -> list[str]:
        command = [
            self.command,
            "--quiet",
            "-r",
            "-s", f"{PCM_SAMPLE_RATE / 1000:g}",
            "--bitwidth", str(PCM_BIT_DEPTH),
            "--signed",
            "--little-endian",
            "-m", "j",
            "-V", str(self.vbr_quality),
            "--add-id3v2",
            "--ignore-tag-errors",
        ]
        for field, option in self.TAG_OPTIONS.items():
            value = tags.get(field)
            if value:
                command.extend([option, value])
        if picture is not None:
            command.extend(["--ti", str(picture)])
        command.extend([str(pcm), str(destination)])
        return command

    def encode(
        self,
        pcm: Path,
        destination: Path,
        tags: Mapping[str, str],
        picture: Path | None,
    ) -> None:
        run_codec(self.build_command(pcm, destination, tags, picture))


__all__ = [
    "FfmpegDecoder",
    "LameEncoder",
    "PCM_BIT_DEPTH",
    "PCM_CHANNELS",
    "PCM_SAMPLE_RATE",
    "run_codec",
]
