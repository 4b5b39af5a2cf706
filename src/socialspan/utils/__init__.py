"""Utility modules for socialspan.

Provides:
- logger: get_logger for logging
"""

from socialspan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
