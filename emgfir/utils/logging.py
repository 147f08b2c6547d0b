"""Logging setup for the ``emgfir`` package logger.

Every module logs through ``logging.getLogger(__name__)``, so all records
flow through the ``"emgfir"`` logger. Importing the package installs a
``NullHandler`` there; applications opt in to console output with
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import IO

LOGGER_NAME = "emgfir"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_CONSOLE_HANDLER = "emgfir-console"


def install_null_handler() -> None:
    """Attach a ``NullHandler`` to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO, stream: IO[str] | None = None) -> logging.Handler:
    """Send package records at ``level`` and above to ``stream`` (stderr by default).

    Calling it again replaces the previous console handler instead of
    stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in [h for h in logger.handlers if h.get_name() == _CONSOLE_HANDLER]:
        logger.removeHandler(h)
    handler = logging.StreamHandler(stream)
    handler.set_name(_CONSOLE_HANDLER)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
