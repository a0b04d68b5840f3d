"""Utility modules for ariaroles.

Provides:
- logger: get_logger for logging
"""

from ariaroles.utils.logger import get_logger

__all__ = [
    "get_logger",
]
