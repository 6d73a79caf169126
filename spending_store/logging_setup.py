"""Package logger wiring.

Store code logs through ``get_logger(__name__)`` and stays silent until the
web app calls ``configure_logging(settings)``. The level comes from
``Settings.log_level``, which ``get_settings()`` has already validated.
"""

import logging
import sys
from typing import IO

from .settings import Settings

PACKAGE_LOGGER = "spending_store"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def configure_logging(settings: Settings, *, stream: IO[str] = sys.stderr) -> None:
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        for h in list(logger.handlers):
            if isinstance(h, logging.NullHandler):
                logger.removeHandler(h)
        logger.addHandler(_handler)
        logger.propagate = False
    logger.setLevel(settings.log_level)


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
