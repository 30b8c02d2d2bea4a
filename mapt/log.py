"""Logging setup for the application."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import IO, TextIO

logger = logging.getLogger("mapt")

_FORMAT = "%(levelname)s %(message)s"


def init_logging(stream: TextIO | None = None, level: int = logging.DEBUG) -> logging.Logger:
    """Send the application's log records to ``stream`` (stdout by default)."""
    close_logging()
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def open_log_file(base_path: str | os.PathLike, file_name: str) -> IO[str]:
    """Open ``base_path/file_name`` for appending, creating it owner-readable only."""
    path = os.path.join(base_path, file_name)
    fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o600)
    return os.fdopen(fd, "a")


def backup_log_file(path: str | os.PathLike | None) -> str | None:
    """Rename the log file with a timestamp suffix; return the new name.

    Nothing happens, and None is returned, when there is no file to back up.
    """
    if path is None:
        return None
    target = f"{os.fspath(path)}_{datetime.now().strftime('%Y%m%d%H%M%S')}"
    try:
        os.rename(path, target)
    except OSError:
        return None
    return target


def close_logging() -> None:
    """Detach and close every handler attached to the application's logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()