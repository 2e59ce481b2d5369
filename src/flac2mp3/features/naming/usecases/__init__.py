"""Naming use cases."""

from .path_resolver import PathResolver, TargetPath

__all__ = ["PathResolver", "TargetPath"]
