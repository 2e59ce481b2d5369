"""Shared value objects and errors used across features."""

from .errors import CodecError, Flac2Mp3Error, MetadataReadError, PathResolutionError
from .track_metadata import TrackMetadata

__all__ = [
    "CodecError",
    "Flac2Mp3Error",
    "MetadataReadError",
    "PathResolutionError",
    "TrackMetadata",
]
