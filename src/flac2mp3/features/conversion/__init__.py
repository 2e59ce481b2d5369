"""Conversion feature: per-file pipeline orchestration."""
