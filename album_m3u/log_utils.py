from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "album_m3u"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Initialize logging to stderr and, optionally, to a file.

    Console gets INFO (DEBUG when verbose); the file, if any, always gets DEBUG.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch_fmt = logging.Formatter("%(levelname)s | %(message)s")
    ch.setFormatter(ch_fmt)
    logger.addHandler(ch)

    # File handler, only on request
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh_fmt = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        fh.setFormatter(fh_fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized")
    return logger
