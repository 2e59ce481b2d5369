"""Metadata feature: reading source tags."""
