"""Logging for HoYoPlay Quick Launch.

Modules log through children of the ``hoyoplay`` logger
(e.g. ``hoyoplay.catalog_scanner``). Console output goes to stderr so the
game listing printed on stdout stays machine-readable.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["LOG_FORMAT", "logger", "setup_logging"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("hoyoplay")


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Attach the console handler and, optionally, a per-session log file.

    Calling it again replaces the handlers it installed before, so the
    level and log file can be changed after settings are reloaded.

    Args:
        level: Console level. The log file always records DEBUG.
        log_file: File truncated at startup, holding only this session.

    Returns:
        The ``hoyoplay`` logger.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)
    logger.setLevel(level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        session_log = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        session_log.setLevel(logging.DEBUG)
        session_log.setFormatter(formatter)
        logger.addHandler(session_log)
        logger.setLevel(logging.DEBUG)

    return logger
