"""Minimal logging utilities for nbfront.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from nbfront.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Skipping notebook header")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "nbfront." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("site")
        >>> logger.name
        'nbfront.site'
    """
    if not (name == "nbfront" or name.startswith("nbfront.")):
        name = f"nbfront.{name}"
    return logging.getLogger(name)
