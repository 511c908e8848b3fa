"""Prompt input buffer with fish-style suggestions.

The buffer is owned by a view component and shared by reference with the
host prompt. Its input mode is one explicit state:

* ``INACTIVE``: empty, not capturing keystrokes;
* ``TYPING``: capturing keystrokes into ``text``;
* ``PINNED``: input finished, the completed text is kept as the active filter.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Protocol

log = logging.getLogger(__name__)


class BufferKind(enum.Enum):
    FILTER = "filter"
    COMMAND = "command"


class BufferState(enum.Enum):
    INACTIVE = "inactive"
    TYPING = "typing"
    PINNED = "pinned"


class BufferListener(Protocol):
    def buffer_changed(self, text: str, suggestion: str) -> None: ...

    def buffer_completed(self, text: str, suggestion: str) -> None: ...

    def buffer_active(self, state: bool, kind: BufferKind) -> None: ...


class FishBuff:
    """Text buffer driving a prompt, with listener fan-out."""

    def __init__(
        self,
        hot_key: str,
        kind: BufferKind = BufferKind.FILTER,
        suggest: Callable[[str], list[str]] | None = None,
    ) -> None:
        self.hot_key = hot_key
        self.kind = kind
        self._suggest = suggest
        self._text = ""
        self._state = BufferState.INACTIVE
        self._suggestions: list[str] = []
        self._suggestion_idx = -1
        self._listeners: list[BufferListener] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def suggestion(self) -> str:
        if 0 <= self._suggestion_idx < len(self._suggestions):
            return self._suggestions[self._suggestion_idx]
        return ""

    def is_active(self) -> bool:
        """Return whether the buffer currently captures keystrokes."""
        return self._state is BufferState.TYPING

    def in_cmd_mode(self) -> bool:
        """Return whether input is in progress or a completed filter is pinned."""
        return self._state is not BufferState.INACTIVE

    def empty(self) -> bool:
        return not self._text

    # Listeners

    def add_listener(self, listener: BufferListener) -> None:
        if any(existing is listener for existing in self._listeners):
            return
        self._listeners.append(listener)

    def remove_listener(self, listener: BufferListener) -> None:
        self._listeners = [existing for existing in self._listeners if existing is not listener]

    def listener_count(self) -> int:
        return len(self._listeners)

    # State transitions

    def set_active(self, active: bool) -> None:
        """Enter or leave typing mode.

        Activation always starts from an empty buffer. Deactivation keeps any
        text as a pinned filter.
        """
        if active:
            was_active = self.is_active()
            self._state = BufferState.TYPING
            if self._text:
                self.clear_text(True)
            if not was_active:
                self._fire_active(True)
            return
        if not self.is_active():
            return
        self._state = BufferState.PINNED if self._text else BufferState.INACTIVE
        self._fire_active(False)

    def add(self, ch: str) -> None:
        """Append ``ch`` while typing; ignored otherwise."""
        if not self.is_active():
            return
        self._text += ch
        self._on_text_changed()

    def set_text(self, text: str, suggestion: str = "") -> None:
        """Replace the text; outside typing mode a non-empty text is pinned."""
        self._text = text
        if not self.is_active():
            self._state = BufferState.PINNED if text else BufferState.INACTIVE
        self._on_text_changed(suggestion)

    def delete(self) -> None:
        """Remove the last character.

        Deleting from an empty typing buffer ends input mode instead.
        """
        if not self._text:
            if self.is_active():
                self._state = BufferState.INACTIVE
                self._fire_active(False)
            return
        self._text = self._text[:-1]
        if not self._text and self._state is BufferState.PINNED:
            self._state = BufferState.INACTIVE
        self._on_text_changed()

    def clear_text(self, fire: bool) -> None:
        self._text = ""
        self._suggestions = []
        self._suggestion_idx = -1
        if self._state is BufferState.PINNED:
            self._state = BufferState.INACTIVE
        if fire:
            self._fire_changed()

    def reset(self) -> None:
        """Clear text and leave input mode."""
        was_active = self.is_active()
        self.clear_text(True)
        self._state = BufferState.INACTIVE
        if was_active:
            self._fire_active(False)

    def complete(self) -> None:
        """Accept the current text, pinning it when non-empty."""
        text, suggestion = self._text, self.suggestion
        was_active = self.is_active()
        self._state = BufferState.PINNED if text else BufferState.INACTIVE
        log.debug("%s buffer completed: %r", self.kind.value, text)
        for listener in list(self._listeners):
            listener.buffer_completed(text, suggestion)
        if was_active:
            self._fire_active(False)

    # Suggestions

    def next_suggestion(self) -> str:
        if not self._suggestions:
            return ""
        self._suggestion_idx = (self._suggestion_idx + 1) % len(self._suggestions)
        self._fire_changed()
        return self.suggestion

    def prev_suggestion(self) -> str:
        if not self._suggestions:
            return ""
        self._suggestion_idx = (self._suggestion_idx - 1) % len(self._suggestions)
        self._fire_changed()
        return self.suggestion

    def accept_suggestion(self) -> bool:
        """Append the current suggestion to the text; return whether one existed."""
        suggestion = self.suggestion
        if not suggestion:
            return False
        self.set_text(self._text + suggestion)
        return True

    def _on_text_changed(self, suggestion: str = "") -> None:
        self._suggestions = []
        self._suggestion_idx = -1
        if suggestion:
            self._suggestions = [suggestion]
            self._suggestion_idx = 0
        elif self._suggest is not None and self._text:
            self._suggestions = [s for s in self._suggest(self._text) if s]
            self._suggestion_idx = 0 if self._suggestions else -1
        self._fire_changed()

    def _fire_changed(self) -> None:
        for listener in list(self._listeners):
            listener.buffer_changed(self._text, self.suggestion)

    def _fire_active(self, state: bool) -> None:
        log.debug("%s buffer active=%s", self.kind.value, state)
        for listener in list(self._listeners):
            listener.buffer_active(state, self.kind)
