"""Configuration loading for flac2mp3."""

from .config import Config
from .paths import default_config_path

__all__ = ["Config", "default_config_path"]
