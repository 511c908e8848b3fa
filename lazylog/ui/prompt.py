"""Prompt bar editing a :class:`~lazylog.model.FishBuff` model."""

from __future__ import annotations

import logging

from ..keys import (
    KEY_BACKSPACE,
    KEY_CTRL_U,
    KEY_CTRL_W,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_RIGHT,
    KEY_TAB,
    KEY_UP,
    is_printable_key,
)
from ..model import FishBuff

log = logging.getLogger(__name__)


class Prompt:
    """Host input line; forwards keystrokes to whichever buffer is bound."""

    def __init__(self) -> None:
        self.model: FishBuff | None = None

    def set_model(self, model: FishBuff) -> None:
        if self.model is not model:
            log.debug("prompt bound to %s buffer", model.kind.value)
        self.model = model

    def in_cmd_mode(self) -> bool:
        """Return whether the bound buffer is currently capturing input."""
        return self.model is not None and self.model.is_active()

    def handle_key(self, key: str) -> bool:
        """Edit the bound buffer while it is typing.

        Returns whether the key was consumed.
        """
        model = self.model
        if model is None or not model.is_active():
            return False
        if key == KEY_ENTER:
            model.complete()
        elif key == KEY_ESC:
            model.reset()
        elif key == KEY_BACKSPACE:
            model.delete()
        elif key == KEY_CTRL_U:
            model.clear_text(True)
        elif key == KEY_CTRL_W:
            model.set_text(model.text.rstrip().rpartition(" ")[0])
        elif key in {KEY_TAB, KEY_RIGHT}:
            model.accept_suggestion()
        elif key == KEY_DOWN:
            model.next_suggestion()
        elif key == KEY_UP:
            model.prev_suggestion()
        elif is_printable_key(key):
            model.add(key)
        else:
            # Unknown special keys (Delete, Ctrl-S, ...) go to the view.
            return False
        return True

    def line(self) -> str:
        """Return the plain prompt text, e.g. ``/error`` plus any suggestion."""
        model = self.model
        if model is None:
            return ""
        return f"{model.hot_key}{model.text}"

    def suggestion(self) -> str:
        return "" if self.model is None else self.model.suggestion
