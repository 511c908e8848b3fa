"""Key identifiers and key events delivered to view components.

A key identifier is a plain string token: either a named special key such as
``"ESC"`` or ``"CTRL_S"``, or one printable character such as ``"/"``.
Tokens match what :func:`lazylog.input.read_key` produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_ESC = "ESC"
KEY_ENTER = "ENTER"
KEY_TAB = "TAB"
KEY_BACKSPACE = "BACKSPACE"
KEY_DELETE = "DELETE"
KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_HOME = "HOME"
KEY_END = "END"
KEY_PGUP = "PGUP"
KEY_PGDN = "PGDN"
KEY_CTRL_C = "CTRL_C"
KEY_CTRL_S = "CTRL_S"
KEY_CTRL_U = "CTRL_U"
KEY_CTRL_D = "CTRL_D"
KEY_CTRL_W = "CTRL_W"

KEY_C = "c"
KEY_SLASH = "/"

_SPECIAL_DISPLAY: dict[str, str] = {
    KEY_ESC: "Esc",
    KEY_ENTER: "Enter",
    KEY_TAB: "Tab",
    KEY_BACKSPACE: "Backspace",
    KEY_DELETE: "Del",
    KEY_UP: "Up",
    KEY_DOWN: "Down",
    KEY_LEFT: "Left",
    KEY_RIGHT: "Right",
    KEY_HOME: "Home",
    KEY_END: "End",
    KEY_PGUP: "PgUp",
    KEY_PGDN: "PgDn",
}


@dataclass(frozen=True)
class KeyEvent:
    """One key press as delivered by the host loop."""

    key: str
    modifiers: frozenset[str] = field(default_factory=frozenset)


def as_key(event: KeyEvent) -> str:
    """Return the registry key identifier for ``event``."""
    return event.key


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def key_display(key: str) -> str:
    """Human-readable key label used by hint listings.

    ``CTRL_S`` renders as ``Ctrl-S``; printable characters render as-is.
    """
    if is_printable_key(key):
        return key
    display = _SPECIAL_DISPLAY.get(key)
    if display is not None:
        return display
    if key.startswith("CTRL_") and len(key) > 5:
        return f"Ctrl-{key[5:].capitalize() if len(key) > 6 else key[5:]}"
    return key.replace("_", "-").title()
