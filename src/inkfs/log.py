"""Logging setup for inkfs.

The library only creates loggers under the ``inkfs`` namespace; it never
installs handlers on import.  Applications (and the CLI) call
:func:`setup_logging` to see the messages.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "inkfs"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ``inkfs`` log records to stderr at *level*.

    Calling it again only changes the level; no duplicate handler is added.

    Returns:
        The ``inkfs`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
