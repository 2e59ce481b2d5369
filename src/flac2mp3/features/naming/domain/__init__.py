"""Naming domain: transliteration and slugs."""

from .slugifier import MAX_SLUG_LENGTH, slugify
from .transliterator import transliterate

__all__ = ["MAX_SLUG_LENGTH", "slugify", "transliterate"]
