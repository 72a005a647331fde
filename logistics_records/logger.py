"""Logging setup shared by the repositories and the front-ends.

Modules obtain loggers through :func:`get_logger`; the entry points call
:func:`configure_logging` once with the configured level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Attach a single stderr handler to the root logger.

    Stdout is reserved for rendered records, so log lines go to stderr.
    Calling this again only changes the level.
    """
    global _handler
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
