"""Artwork feature: extracting and selecting embedded pictures."""
