"""Utility modules for nbfront.

Provides:
- logger: get_logger for logging
"""

from nbfront.utils.logger import get_logger

__all__ = [
    "get_logger",
]
