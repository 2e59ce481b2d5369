"""Conversion use cases."""

from .normalization import FIELD_DEFAULTS, normalize_metadata, normalize_track_number
from .orchestrator import ConversionOrchestrator
from .playlist import PlaylistWriter
from .ports import DecoderPort, EncoderPort, PlaylistPort
from .processing_types import BatchSummary, ConversionJob, ConversionResult, JobState

__all__ = [
    "BatchSummary",
    "ConversionJob",
    "ConversionOrchestrator",
    "ConversionResult",
    "DecoderPort",
    "EncoderPort",
    "FIELD_DEFAULTS",
    "JobState",
    "PlaylistPort",
    "PlaylistWriter",
    "normalize_metadata",
    "normalize_track_number",
]
