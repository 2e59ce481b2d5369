"""Where: features/conversion/usecases/processing_types.py
What: Job states, job records and results for the conversion pipeline.
Why: Keep the orchestrator lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from flac2mp3.features.naming.usecases.path_resolver import TargetPath
from flac2mp3.shared.track_metadata import TrackMetadata


class JobState(StrEnum):
    """Pipeline states of a single conversion job, in execution order."""

    VALIDATE = "validate"
    RESET_SCRATCH = "reset_scratch"
    EXTRACT_TAGS = "extract_tags"
    NORMALIZE = "normalize"
    EXTRACT_PICTURES = "extract_pictures"
    SELECT_PICTURE = "select_picture"
    RESOLVE_PATH = "resolve_path"
    CREATE_DIRECTORY = "create_directory"
    DECODE = "decode"
    ENCODE = "encode"
    APPEND_PLAYLIST = "append_playlist"
    DONE = "done"


@dataclass(slots=True)
class ConversionJob:
    """Mutable bookkeeping for one source file while it moves through the pipeline."""

    source_path: Path
    sequence: int | None = None
    state: JobState = JobState.VALIDATE
    metadata: TrackMetadata | None = None
    picture: Path | None = None
    target: TargetPath | None = None
    output_path: Path | None = None
    start_time: float = field(default_factory=time.perf_counter)

    def advance(self, state: JobState) -> None:
        self.state = state

    def duration_ms(self) -> float:
        return (time.perf_counter() - self.start_time) * 1000


@dataclass
class ConversionResult:
    """Result of converting one source file."""

    source_path: Path
    state: JobState
    success: bool = False
    skipped: bool = False
    output_path: Path | None = None
    metadata: TrackMetadata | None = None
    picture_type: str | None = None
    error_message: str | None = None

    @classmethod
    def from_job(cls, job: ConversionJob, **values: Any) -> "ConversionResult":
        return cls(
            source_path=job.source_path,
            state=job.state,
            output_path=job.output_path,
            metadata=job.metadata,
            picture_type=job.picture.stem if job.picture is not None else None,
            **values,
        )


@dataclass(slots=True)
class BatchSummary:
    """Counters for a whole conversion run."""

    converted: int = 0
    skipped: int = 0
    failed: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    results: list[ConversionResult] = field(default_factory=list)

    def record(self, result: ConversionResult) -> None:
        self.results.append(result)
        if result.success:
            self.converted += 1
        elif result.skipped:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def total(self) -> int:
        return len(self.results)

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "converted": self.converted,
            "skipped": self.skipped,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = ["BatchSummary", "ConversionJob", "ConversionResult", "JobState"]
