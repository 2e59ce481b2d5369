"""Metadata use cases."""

from .ports import MetadataSourcePort
from .tag_reader import TagReader

__all__ = ["MetadataSourcePort", "TagReader"]
