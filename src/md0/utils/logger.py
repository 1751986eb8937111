"""Minimal logging utilities for md0.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from md0.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("parsed %d lines into %d tokens", 3, 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "md0." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("lexer.core")
        >>> logger.name
        'md0.lexer.core'
    """
    if not (name == "md0" or name.startswith("md0.")):
        name = f"md0.{name}"
    return logging.getLogger(name)
