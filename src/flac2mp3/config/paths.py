"""Location of the configuration file.

Policy, first match wins:
- an explicit path handed to ``Config.load``;
- ``$FLAC2MP3_CONFIG``;
- ``$XDG_CONFIG_HOME/flac2mp3/config.toml`` (``~/.config`` fallback).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


ENV_CONFIG_FILE: Final[str] = "FLAC2MP3_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_CONFIG_RELATIVE: Final[Path] = Path("flac2mp3") / "config.toml"


def _config_home(env: Mapping[str, str]) -> Path:
    xdg = (env.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    return Path(xdg) if xdg else Path.home() / ".config"


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the absolute path of the TOML config file.

    Every candidate has ``~`` expanded and is resolved, so an explicit path
    and ``$FLAC2MP3_CONFIG`` are interpreted the same way.
    """
    mapping = env if env is not None else os.environ
    override = (mapping.get(ENV_CONFIG_FILE) or "").strip()

    if explicit_path is not None:
        candidate = Path(explicit_path)
    elif override:
        candidate = Path(override)
    else:
        candidate = _config_home(mapping) / _CONFIG_RELATIVE
    return candidate.expanduser().resolve()


__all__ = ["ENV_CONFIG_FILE", "default_config_path"]
