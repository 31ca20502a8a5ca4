"""Utility modules for orgtree.

Provides:
- logger: get_logger for logging
"""

from orgtree.utils.logger import get_logger

__all__ = [
    "get_logger",
]
