"""Minimal logging utilities for socialspan.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from socialspan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Colorize pass: %d spans", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "socialspan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("tracker")
        >>> logger.name
        'socialspan.tracker'
    """
    if not (name == "socialspan" or name.startswith("socialspan.")):
        name = f"socialspan.{name}"
    return logging.getLogger(name)
