"""Transient notification surface."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

log = logging.getLogger(__name__)

FLASH_SECONDS = 3.0


class FlashLevel(enum.Enum):
    INFO = "info"
    WARN = "warn"
    ERR = "err"


_LOG_LEVELS: dict[FlashLevel, int] = {
    FlashLevel.INFO: logging.INFO,
    FlashLevel.WARN: logging.WARNING,
    FlashLevel.ERR: logging.ERROR,
}


@dataclass(frozen=True)
class FlashMessage:
    level: FlashLevel
    text: str
    until: float


class Flash:
    """Holds at most one short-lived message; newer messages replace older ones."""

    def __init__(
        self,
        duration: float = FLASH_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration
        self._clock = clock
        self._message: FlashMessage | None = None

    def info(self, text: str) -> None:
        self._set(FlashLevel.INFO, text)

    def infof(self, fmt: str, *args: object) -> None:
        self._set(FlashLevel.INFO, fmt % args if args else fmt)

    def warn(self, text: str) -> None:
        self._set(FlashLevel.WARN, text)

    def err(self, error: BaseException | str) -> None:
        self._set(FlashLevel.ERR, str(error) or type(error).__name__)

    def clear(self) -> None:
        self._message = None

    def current(self) -> FlashMessage | None:
        """Return the live message, dropping it once expired."""
        if self._message is not None and self._clock() >= self._message.until:
            self._message = None
        return self._message

    def _set(self, level: FlashLevel, text: str) -> None:
        log.log(_LOG_LEVELS[level], "flash: %s", text)
        self._message = FlashMessage(level=level, text=text, until=self._clock() + self.duration)
