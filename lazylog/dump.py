"""Writes viewer contents to dump files."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

log = logging.getLogger(__name__)

DUMP_EXTENSION = ".log"
DUMP_FILE_MODE = 0o600


def dump_file_name(title: str, now_ns: int | None = None) -> str:
    """Return ``<title>-<unix nanos>.log`` with path separators flattened."""
    stamp = time.time_ns() if now_ns is None else now_ns
    name = title.replace("/", "-").replace(os.sep, "-").strip() or "log"
    return f"{name}-{stamp}{DUMP_EXTENSION}"


def save_log(dump_dir: Path, cluster: str, title: str, text: str) -> Path:
    """Write ``text`` under ``dump_dir/<cluster>`` and return the file path.

    Characters that cannot be encoded are written as ``?``. Raises
    ``OSError`` when the directory or file cannot be written; a partly
    written file is removed.
    """
    target_dir = dump_dir / cluster.replace("/", "-")
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / dump_file_name(title)
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, DUMP_FILE_MODE)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="replace") as handle:
            handle.write(text)
    except OSError:
        path.unlink(missing_ok=True)
        raise
    log.info("saved %d bytes to %s", len(text), path)
    return path
