"""
Console logging for the imagemanip command line.

Modules log through ``logging.getLogger(__name__)``; records propagate to the
``imagemanip`` package logger, which is the only one given a handler.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "imagemanip"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(level: str | int | None = None) -> logging.Logger:
    """
    Return the ``imagemanip`` logger, ready to print to stderr.

    The stream handler is attached once, however often this is called.
    ``level`` accepts a name ("debug", "INFO") or a logging constant; when
    omitted a fresh logger starts at INFO and an existing one keeps its level.

    Raises:
        ValueError: if ``level`` is an unknown level name
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = logging.INFO

    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
