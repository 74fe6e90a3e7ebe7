"""Application-wide logging helpers.

Modules call ``get_logger(__name__)`` for a module-named logger. The CLI calls
``configure_root_logger`` once per process to attach a stderr handler; library
use without the CLI leaves logging configuration to the caller.
"""

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.WARNING) -> None:
    """Configure the root logger with a single stderr handler.

    Repeated calls only adjust the level, so no duplicate handlers are added.
    No handler is added when the root logger already has one (e.g. under
    a test runner).
    """
    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED or root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""
    return logging.getLogger(name)
