"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from flac2mp3.config.config import Config


@final
@dataclass(slots=True)
class ConvertArgs:
    """Parsed command line arguments plus the loaded configuration."""

    playlist: Path | None
    verbose: bool
    quiet: bool
    config: Config = field(default_factory=Config)


__all__ = ["ConvertArgs"]
