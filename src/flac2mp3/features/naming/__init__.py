"""Naming feature: transliteration, slugs and target paths."""
