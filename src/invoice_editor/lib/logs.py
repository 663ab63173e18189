"""
Logging utilities for the Invoice Editor.

Every module logs through a child of the `invoice_editor` logger. The
handler and level live on that parent only, so a module logger never
prints a line twice and LOG_LEVEL applies to the whole package.
"""

import logging
import os
from pathlib import Path

PACKAGE_LOGGER = "invoice_editor"

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers:
        package.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        package.addHandler(handler)
    return package


def logger(name: str) -> logging.Logger:
    """
    Return the package child logger for a module.

    Args:
        name: Module name or __file__; paths are reduced to their stem, so
            `state.py` logs as `invoice_editor.state`.

    Returns:
        logging.Logger without handlers of its own.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    return _package_logger().getChild(name)
