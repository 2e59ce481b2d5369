"""Artwork use cases."""

from .picture_extractor import PictureExtractor
from .picture_selector import PictureSelector

__all__ = ["PictureExtractor", "PictureSelector"]
