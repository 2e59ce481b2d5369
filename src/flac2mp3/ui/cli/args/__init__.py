"""Command line argument handling."""

from .options import ConvertArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "ConvertArgs"]
