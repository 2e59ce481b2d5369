# /*
# Where: features/conversion/usecases/orchestrator.py
# What: Per-file conversion pipeline and the sequential batch loop around it.
# Why: One place owns the job state machine and the per-job failure policy.
# Assumptions:
# - Jobs run strictly one after another inside a single ScratchArea.
# - Collaborators raise CodecError, PathResolutionError or OSError for per-job failures.
# Trade-offs:
# - Two sources resolving to the same target overwrite each other; later write wins.
# */

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import final

from flac2mp3.features.artwork.usecases import PictureExtractor, PictureSelector
from flac2mp3.features.metadata.usecases import TagReader
from flac2mp3.features.naming.usecases import PathResolver
from flac2mp3.platform.filesystem import ScratchArea, ensure_directory
from flac2mp3.platform.logging import logger
from flac2mp3.shared.errors import CodecError, PathResolutionError
from flac2mp3.shared.events import ConversionEvent, log_event

from .normalization import normalize_metadata
from .ports import DecoderPort, EncoderPort, PlaylistPort
from .processing_types import BatchSummary, ConversionJob, ConversionResult, JobState

PCM_FILE_NAME = "decoded.pcm"


@final
class ConversionOrchestrator:
    """Drive source files through tagging, naming, decoding and encoding."""

    def __init__(
        self,
        *,
        output_root: Path,
        scratch: ScratchArea,
        tag_reader: TagReader,
        picture_extractor: PictureExtractor,
        picture_selector: PictureSelector,
        path_resolver: PathResolver,
        decoder: DecoderPort,
        encoder: EncoderPort,
        playlist: PlaylistPort,
    ) -> None:
        self.output_root: Path = output_root
        self.scratch: ScratchArea = scratch
        self.tag_reader: TagReader = tag_reader
        self.picture_extractor: PictureExtractor = picture_extractor
        self.picture_selector: PictureSelector = picture_selector
        self.path_resolver: PathResolver = path_resolver
        self.decoder: DecoderPort = decoder
        self.encoder: EncoderPort = encoder
        self.playlist: PlaylistPort = playlist

    def convert_all(self, sources: Iterable[Path]) -> BatchSummary:
        """Convert every source in order; per-file failures never stop the batch."""

        summary = BatchSummary()
        log_event(
            logging.INFO,
            ConversionEvent.BATCH_START,
            "Batch start [output=%s]",
            self.output_root,
            output_root=self.output_root,
        )
        for sequence, source in enumerate(sources, start=1):
            summary.record(self.convert(source, sequence=sequence))

        log_event(
            logging.INFO,
            ConversionEvent.BATCH_COMPLETE,
            "Batch complete [converted=%d, skipped=%d, failed=%d]",
            summary.converted,
            summary.skipped,
            summary.failed,
            **summary.summary_extra(),
        )
        return summary

    def convert(self, source_path: Path, *, sequence: int | None = None) -> ConversionResult:
        """Run the job state machine for ``source_path``."""

        job = ConversionJob(source_path=source_path, sequence=sequence)

        if not source_path.is_file():
            log_event(
                logging.WARNING,
                ConversionEvent.JOB_SKIP_MISSING,
                "Source is not a regular file: %s",
                source_path,
                sequence=sequence,
                source_path=source_path,
            )
            return ConversionResult.from_job(job, skipped=True, error_message="source_missing")

        log_event(
            logging.INFO,
            ConversionEvent.JOB_START,
            "Converting %s",
            source_path,
            sequence=sequence,
            source_path=source_path,
        )

        try:
            job.advance(JobState.RESET_SCRATCH)
            with self.scratch.job_directory() as scratch_dir:
                self._run(job, scratch_dir)
        except (CodecError, PathResolutionError, OSError) as exc:
            log_event(
                logging.ERROR,
                ConversionEvent.JOB_ERROR,
                "Conversion failed at %s: %s",
                job.state.value,
                exc,
                sequence=sequence,
                source_path=source_path,
                state=job.state.value,
                error_message=str(exc),
            )
            if isinstance(exc, CodecError) and exc.stderr:
                logger.debug("%s stderr:\n%s", exc.command[0], exc.stderr)
            return ConversionResult.from_job(job, error_message=str(exc))

        metadata = job.metadata
        log_event(
            logging.INFO,
            ConversionEvent.JOB_SUCCESS,
            "Converted %s -> %s",
            source_path,
            job.output_path,
            sequence=sequence,
            source_path=source_path,
            target_path=job.output_path,
            duration_ms=job.duration_ms(),
            artist=metadata.artist if metadata else None,
            title=metadata.title if metadata else None,
        )
        return ConversionResult.from_job(job, success=True)

    def _run(self, job: ConversionJob, scratch_dir: Path) -> None:
        job.advance(JobState.EXTRACT_TAGS)
        raw_metadata = self.tag_reader.read(job.source_path)

        job.advance(JobState.NORMALIZE)
        job.metadata = normalize_metadata(raw_metadata)
        logger.debug("Normalized metadata for %s: %s", job.source_path.name, job.metadata)

        job.advance(JobState.EXTRACT_PICTURES)
        _ = self.picture_extractor.extract(job.source_path, scratch_dir)

        job.advance(JobState.SELECT_PICTURE)
        job.picture = self.picture_selector.select(scratch_dir)
        logger.debug("Selected picture: %s", job.picture.name if job.picture else None)

        job.advance(JobState.RESOLVE_PATH)
        job.target = self.path_resolver.resolve(job.metadata)
        job.output_path = job.target.under(self.output_root)

        job.advance(JobState.CREATE_DIRECTORY)
        _ = ensure_directory(job.output_path.parent)

        job.advance(JobState.DECODE)
        pcm_path = scratch_dir / PCM_FILE_NAME
        self.decoder.decode(job.source_path, pcm_path)

        job.advance(JobState.ENCODE)
        self.encoder.encode(pcm_path, job.output_path, job.metadata.as_tags(), job.picture)

        job.advance(JobState.APPEND_PLAYLIST)
        self.playlist.append(job.target.relative_path.as_posix())

        job.advance(JobState.DONE)


__all__ = ["ConversionOrchestrator", "PCM_FILE_NAME"]
