"""Centralized logging configuration for Guitar Dashboard.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Dict, Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "guitar_dashboard": logging.INFO,
    "guitar_dashboard.note_utils": logging.INFO,
    "guitar_dashboard.scales": logging.INFO,
    "guitar_dashboard.fretboard": logging.INFO,
    "guitar_dashboard.services": logging.INFO,
    "guitar_dashboard.core": logging.INFO,
    "guitar_dashboard.cli": logging.WARNING,  # CLI output goes to stdout, keep logs quiet
    # Libraries/third-party
    "pyfiglet": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Log records go to stderr so that command output on stdout stays clean.

    Args:
        level: If provided, override all 'guitar_dashboard' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler, rebinding it if stderr was swapped
    if _console_handler is None or getattr(_console_handler, "stream", None) is not sys.stderr:
        _console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("guitar_dashboard"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        # Clear existing handlers and add the shared one
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_console_handler)
        logger.propagate = False

    logging.getLogger("guitar_dashboard").debug("Logging configuration complete")


# Cache for loggers handed out to modules
_logger_cache: Dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Levels and handlers are not touched here; loggers below the entries in
    MODULE_LOG_LEVELS inherit from them once setup_logging() has run.

    Args:
        name: The full module name (e.g., 'guitar_dashboard.fretboard')

    Returns:
        The cached logger instance
    """
    if name not in _logger_cache:
        _logger_cache[name] = logging.getLogger(name)
    return _logger_cache[name]
