"""Logging for tagscan.

Every module logs through ``get_logger(__name__)``, so all scanner output
sits under the ``tagscan`` logger. Nothing is printed unless the
application configures logging, or calls enable_debug() to trace a scan.

Example:
    >>> from tagscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanned tag <P>")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "tagscan"

DEBUG_FORMAT = "%(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "tagscan." namespace.

    Example:
        >>> get_logger("scanner").name
        'tagscan.scanner'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def enable_debug(stream: TextIO | None = None) -> logging.Handler:
    """Trace scanning: tags, text runs, swallowed markup and scan errors.

    Attaches a handler to the ``tagscan`` logger and lowers it to DEBUG.
    Pass the returned handler to disable_debug() to undo.

    Args:
        stream: Where to write (defaults to stderr)

    Returns:
        The attached handler
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    logger = logging.getLogger(ROOT_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def disable_debug(handler: logging.Handler) -> None:
    """Detach a handler from enable_debug() and restore the default level."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
