"""Diagnostic logging setup.

The UI owns the terminal, so diagnostics only ever go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", path: Path | None = None) -> Path | None:
    """Attach a file handler to the ``lazylog`` logger.

    Returns the log path, or ``None`` when the file cannot be opened (logging
    then stays disabled rather than writing over the UI).
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False
    target = path if path is not None else DEFAULT_LOG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    return target
