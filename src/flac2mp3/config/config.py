"""Configuration management for flac2mp3."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from flac2mp3.config.paths import default_config_path
from flac2mp3.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file
    log_file: Path | None = _path_field()

    # External codec binaries
    decoder_command: str = "ffmpeg"
    encoder_command: str = "lame"

    # LAME variable bit-rate quality, 0 (best) to 9
    vbr_quality: int = 2

    # Playlist written next to the converted library
    playlist_name: str = "playlist.m3u"

    # Prefix of the temporary scratch area
    scratch_prefix: str = "flac2mp3-"

    VBR_QUALITY_RANGE: ClassVar[range] = range(0, 10)

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and reset invalid values."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        # TOML booleans arrive as bool, a subclass of int.
        quality = self.vbr_quality
        if isinstance(quality, bool) or not isinstance(quality, int) or quality not in self.VBR_QUALITY_RANGE:
            logger.warning("Invalid vbr_quality %r, using 2", self.vbr_quality)
            self.vbr_quality = 2

        for name in ("decoder_command", "encoder_command", "playlist_name", "scratch_prefix"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                default = next(f.default for f in fields(self) if f.name == name)
                logger.warning("Invalid %s %r, using %r", name, value, default)
                setattr(self, name, default)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields the defaults. Unknown keys are ignored with a
        warning.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_file = default_config_path(path)

        if not config_file.exists():
            logger.debug("No configuration file at %s, using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key %r", key)

        logger.debug("Configuration loaded from %s", config_file)
        return cls(**{key: value for key, value in config_dict.items() if key in known})
