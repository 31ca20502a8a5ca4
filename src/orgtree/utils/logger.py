"""Minimal logging utilities for orgtree.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from orgtree.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "orgtree." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'orgtree.mymodule'
    """
    if not (name == "orgtree" or name.startswith("orgtree.")):
        name = f"orgtree.{name}"
    return logging.getLogger(name)
