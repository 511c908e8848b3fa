"""View stack backing the host's "go back" navigation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from ..actions import MenuHint
from ..keys import KeyEvent

log = logging.getLogger(__name__)


class Component(Protocol):
    """Lifecycle and input surface the host expects from a view."""

    def name(self) -> str: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def hints(self) -> list[MenuHint]: ...

    def keyboard(self, event: KeyEvent) -> KeyEvent | None: ...

    def handle_key(self, key: str, width: int, height: int) -> bool: ...

    def draw(self, width: int, height: int, focused: bool = True) -> list[str]: ...


class PageStack:
    """Ordered stack of views; the top one receives input and is drawn.

    Pushing keeps lower views alive. Popping ends the popped view's lifetime
    by calling its ``stop``.
    """

    def __init__(self) -> None:
        self._stack: list[Component] = []
        self._listeners: list[Callable[[Component | None], None]] = []

    def add_listener(self, listener: Callable[[Component | None], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def top(self) -> Component | None:
        return self._stack[-1] if self._stack else None

    def is_last(self) -> bool:
        return len(self._stack) <= 1

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, component: Component) -> None:
        self._stack.append(component)
        log.debug("pushed view %r (depth %d)", component.name(), len(self._stack))
        component.start()
        self._notify()

    def pop(self) -> Component | None:
        """Remove and stop the top view; the last view is never popped."""
        if self.is_last():
            return None
        component = self._stack.pop()
        log.debug("popped view %r (depth %d)", component.name(), len(self._stack))
        component.stop()
        self._notify()
        return component

    def clear(self) -> None:
        """Stop every view, topmost first."""
        while self._stack:
            self._stack.pop().stop()
        self._notify()

    def _notify(self) -> None:
        top = self.top()
        for listener in list(self._listeners):
            listener(top)
