"""Shared pytest fixtures: FLAC file builder and fake codec collaborators."""

from __future__ import annotations

import struct
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

import pytest
from mutagen.flac import FLAC, Picture

from flac2mp3.shared.errors import CodecError

# Minimal STREAMINFO: 4096-sample blocks, 44.1 kHz, stereo, 16-bit, no frames.
_STREAMINFO = (
    struct.pack(">HH", 4096, 4096)
    + b"\x00\x00\x00\x00\x00\x00"
    + struct.pack(">H", 44100 >> 4)
    + bytes([((44100 & 0xF) << 4) | ((2 - 1) << 1)])
    + (15 << 36).to_bytes(5, "big")
    + b"\x00" * 16
)
_FLAC_HEADER = b"fLaC" + bytes([0x80]) + len(_STREAMINFO).to_bytes(3, "big") + _STREAMINFO


FlacFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration loading at a file that does not exist."""

    config_path = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("FLAC2MP3_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def make_flac(tmp_path: Path) -> FlacFactory:
    """Build a tag-only FLAC file with the given comments and pictures."""

    def _make(
        name: str = "track.flac",
        tags: Mapping[str, str] | None = None,
        pictures: list[tuple[int, str, bytes]] | None = None,
    ) -> Path:
        path = tmp_path / "sources" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(_FLAC_HEADER)

        if tags or pictures:
            audio = FLAC(path)
            for key, value in (tags or {}).items():
                audio[key] = value
            for type_code, mime, data in pictures or []:
                picture = Picture()
                picture.type = type_code
                picture.mime = mime
                picture.data = data
                audio.add_picture(picture)
            audio.save()
        return path

    return _make


class FakeDecoder:
    """Decoder that writes placeholder PCM and records calls."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.calls: list[tuple[Path, Path]] = []
        self.fail_for: set[str] = fail_for or set()

    def decode(self, source: Path, destination: Path) -> None:
        self.calls.append((source, destination))
        if source.name in self.fail_for:
            raise CodecError(["ffmpeg", str(source)], "exited with status 1", "corrupt stream")
        _ = destination.write_bytes(b"\x00" * 12)


@dataclass
class EncodeCall:
    pcm: Path
    destination: Path
    tags: dict[str, str]
    picture: Path | None
    picture_bytes: bytes | None


class FakeEncoder:
    """Encoder that writes a marker file and captures tags and artwork."""

    def __init__(self) -> None:
        self.calls: list[EncodeCall] = []

    def encode(
        self,
        pcm: Path,
        destination: Path,
        tags: Mapping[str, str],
        picture: Path | None,
    ) -> None:
        self.calls.append(
            EncodeCall(
                pcm=pcm,
                destination=destination,
                tags=dict(tags),
                picture=picture,
                picture_bytes=picture.read_bytes() if picture is not None else None,
            )
        )
        _ = destination.write_bytes(b"ID3")


@pytest.fixture
def fake_decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()
