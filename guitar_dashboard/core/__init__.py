"""Core components for the Guitar Dashboard application."""

from .config import ConfigManager, FretboardSettings

__all__ = ["ConfigManager", "FretboardSettings"]
