"""flac2mp3: convert FLAC sources into a tagged, slug-named MP3 library."""

__version__ = "0.1.0"

__all__ = ["__version__"]
