"""Command-line interface for Guitar Dashboard."""

from .main import main

__all__ = ["main"]
