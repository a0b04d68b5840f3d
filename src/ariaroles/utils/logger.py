"""Minimal logging utilities for ariaroles.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from ariaroles.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building role registry")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ariaroles." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'ariaroles.mymodule'
    """
    if not (name == "ariaroles" or name.startswith("ariaroles.")):
        name = f"ariaroles.{name}"
    return logging.getLogger(name)
