"""Convert command wiring adapters into the orchestrator."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO, final

from flac2mp3.features.artwork.usecases import PictureExtractor, PictureSelector
from flac2mp3.features.conversion.usecases import (
    BatchSummary,
    ConversionOrchestrator,
    PlaylistWriter,
)
from flac2mp3.features.metadata.usecases import TagReader
from flac2mp3.features.naming.usecases import PathResolver
from flac2mp3.platform.codecs import FfmpegDecoder, LameEncoder
from flac2mp3.platform.filesystem import ScratchArea
from flac2mp3.platform.logging import logger
from flac2mp3.platform.mutagen_source import MutagenFlacSource
from flac2mp3.ui.cli.args.options import ConvertArgs
from flac2mp3.ui.cli.inputs import read_m3u_sources, read_null_separated


@final
class ConvertCommand:
    """Convert the sources named on stdin or in an M3U playlist."""

    def __init__(self, args: ConvertArgs, output_root: Path | None = None) -> None:
        self.args: ConvertArgs = args
        self.output_root: Path = output_root if output_root is not None else Path.cwd()

    def sources(self, stdin: BinaryIO | None = None) -> Iterable[Path]:
        if self.args.playlist is not None:
            return read_m3u_sources(self.args.playlist)
        return read_null_separated(stdin if stdin is not None else sys.stdin.buffer)

    def execute(self, stdin: BinaryIO | None = None) -> BatchSummary:
        config = self.args.config
        source = MutagenFlacSource()
        playlist = PlaylistWriter(self.output_root / config.playlist_name)

        with ScratchArea(prefix=config.scratch_prefix) as scratch:
            orchestrator = ConversionOrchestrator(
                output_root=self.output_root,
                scratch=scratch,
                tag_reader=TagReader(source),
                picture_extractor=PictureExtractor(source),
                picture_selector=PictureSelector(),
                path_resolver=PathResolver(),
                decoder=FfmpegDecoder(config.decoder_command),
                encoder=LameEncoder(config.encoder_command, config.vbr_quality),
                playlist=playlist,
            )
            summary = orchestrator.convert_all(self.sources(stdin))

        logger.info("%s now lists %d entries", playlist.path.name, playlist.count())
        return summary


__all__ = ["ConvertCommand"]
