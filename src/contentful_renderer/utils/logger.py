"""Minimal logging utilities for contentful_renderer.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from contentful_renderer.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Skipping node")
"""

from __future__ import annotations

import logging

_ROOT = "contentful_renderer"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "contentful_renderer." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'contentful_renderer.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
