# Where: flac2mp3.shared.track_metadata
# What: Canonical TrackMetadata dataclass shared across features.
# Why: One immutable record flows from tag extraction to the encoder.

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Metadata for a music track. Absent fields are empty strings."""

    genre: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""
    track_number: str = ""
    title: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_values(self, **values: str) -> "TrackMetadata":
        """Return a copy with ``values`` replaced."""
        return replace(self, **values)

    def as_tags(self) -> dict[str, str]:
        """Return the non-empty fields keyed by field name."""
        return {name: value for name in self.field_names() if (value := getattr(self, name))}

    def is_empty(self) -> bool:
        return not self.as_tags()


__all__ = ["TrackMetadata"]
