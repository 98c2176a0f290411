"""Minimal logging utilities for xmlscan.

Provides a simple get_logger function that wraps the standard library logging.
The package never installs handlers; applications configure logging.

Example:
    >>> from xmlscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Loaded %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xmlscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'xmlscan.mymodule'
    """
    if not (name == "xmlscan" or name.startswith("xmlscan.")):
        name = f"xmlscan.{name}"
    return logging.getLogger(name)
