"""Logging bootstrap for applications embedding sandpad.

Library modules only ever call ``logging.getLogger("sandpad")``; the
handler/level configuration happens once, here, when the host asks for it.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config.settings import SandpadSettings

__all__ = ["LOGGER_NAME", "LOG_FORMAT", "configure_logging"]

LOGGER_NAME = "sandpad"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[SandpadSettings] = None) -> logging.Logger:
    """Configure the root handler and return the ``sandpad`` logger."""
    if settings is None:
        level = logging.INFO
    elif settings.debug_mode:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return logger
