"""Mini README: Application-wide logging helpers for clinab.

Structure:
    * configure_root_logger - install the stderr handler and adjust the level.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules import ``get_logger`` at import time. The CLI calls
    ``configure_root_logger`` once the effective level is known (``--verbose``
    or ``YNAB_LOG_LEVEL``). Diagnostics always go to stderr so that JSON
    written to stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOGGER_INITIALISED = False
_DEFAULT_LEVEL = logging.WARNING


def configure_root_logger(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Configure the root logger once, then only adjust its level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
