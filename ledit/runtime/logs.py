"""File logging setup for the TUI session.

Records go to ``latest.log`` in the log directory, truncated at startup.
Nothing is written to the terminal, which the TUI owns.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILENAME = "latest.log"
LOG_FORMAT = "[%(levelname)s][%(asctime)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "ledit"


def setup_logging(log_dir: Path, level: int | str = logging.INFO) -> Path | None:
    """Attach one file handler to the package logger.

    Returns the log file path, or ``None`` when the directory cannot be
    created; logging is then silenced with a ``NullHandler``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False

    log_file = log_dir / LOG_FILENAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    return log_file
