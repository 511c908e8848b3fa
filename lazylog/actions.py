"""Key-action registry primitives shared by view components."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from .keys import KeyEvent, key_display

ActionHandler = Callable[[KeyEvent], "KeyEvent | None"]


@dataclass(frozen=True)
class KeyAction:
    """Named handler bound to one key.

    ``visible`` controls whether the action shows up in hint listings.
    ``shared`` marks actions that stay meaningful while another component owns
    the prompt.
    """

    description: str
    handler: ActionHandler
    visible: bool = True
    shared: bool = False

    def action(self, event: KeyEvent) -> KeyEvent | None:
        """Invoke the bound handler and return its propagation result."""
        return self.handler(event)


def new_key_action(description: str, handler: ActionHandler, visible: bool) -> KeyAction:
    return KeyAction(description=description, handler=handler, visible=visible)


def new_shared_key_action(description: str, handler: ActionHandler, visible: bool) -> KeyAction:
    return KeyAction(description=description, handler=handler, visible=visible, shared=True)


@dataclass(frozen=True)
class MenuHint:
    """One key/description pair rendered by the hint bar."""

    key: str
    description: str

    @property
    def display(self) -> str:
        return key_display(self.key)


class KeyActions:
    """Ordered key-dispatch table with overwrite-on-set semantics."""

    def __init__(self, entries: Mapping[str, KeyAction] | None = None) -> None:
        self._actions: dict[str, KeyAction] = {}
        if entries:
            self.set(entries)

    def set(self, entries: Mapping[str, KeyAction]) -> KeyActions:
        """Merge ``entries`` into the table; later bindings replace earlier ones."""
        for key, action in entries.items():
            self._actions[key] = action
        return self

    def get(self, key: str) -> KeyAction | None:
        """Return the action bound to ``key`` or ``None`` when unbound."""
        return self._actions.get(key)

    def delete(self, *keys: str) -> None:
        """Drop bindings for ``keys``; unknown keys are ignored."""
        for key in keys:
            self._actions.pop(key, None)

    def hints(self) -> list[MenuHint]:
        """Return visible bindings sorted by key display form."""
        visible = [
            MenuHint(key=key, description=action.description)
            for key, action in self._actions.items()
            if action.visible
        ]
        return sorted(visible, key=lambda hint: (hint.display.lower(), hint.display))

    def keys(self) -> list[str]:
        return list(self._actions)

    def __contains__(self, key: object) -> bool:
        return key in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)
