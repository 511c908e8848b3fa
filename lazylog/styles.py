"""Skins and the broadcast style registry.

A :class:`Skin` is a named palette of color names understood by
:mod:`lazylog.colortags`. :class:`Styles` holds the current skin for the whole
application and notifies registered listeners whenever it changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Skin:
    """Semantic color palette used by views and chrome."""

    name: str
    bg: str
    fg: str
    border: str
    border_focus: str
    title: str
    highlight: str
    prompt_fg: str
    prompt_bg: str
    flash_info: str
    flash_warn: str
    flash_err: str
    menu_key: str
    menu_desc: str


DEFAULT_SKIN = Skin(
    name="default",
    bg="black",
    fg="cadetblue",
    border="dodgerblue",
    border_focus="lightskyblue",
    title="aqua",
    highlight="orange",
    prompt_fg="cadetblue",
    prompt_bg="black",
    flash_info="navy",
    flash_warn="orange",
    flash_err="orangered",
    menu_key="dodgerblue",
    menu_desc="white",
)

OCEAN_SKIN = Skin(
    name="ocean",
    bg="midnightblue",
    fg="skyblue",
    border="steelblue",
    border_focus="deepskyblue",
    title="aqua",
    highlight="gold",
    prompt_fg="lightskyblue",
    prompt_bg="midnightblue",
    flash_info="deepskyblue",
    flash_warn="gold",
    flash_err="hotpink",
    menu_key="deepskyblue",
    menu_desc="lightgray",
)

PLAIN_SKIN = Skin(
    name="plain",
    bg="",
    fg="",
    border="",
    border_focus="",
    title="",
    highlight="",
    prompt_fg="",
    prompt_bg="",
    flash_info="",
    flash_warn="",
    flash_err="",
    menu_key="",
    menu_desc="",
)

_SKINS: dict[str, Skin] = {
    DEFAULT_SKIN.name: DEFAULT_SKIN,
    OCEAN_SKIN.name: OCEAN_SKIN,
}


def available_skin_names() -> tuple[str, ...]:
    """Return selectable non-plain skin names."""
    return tuple(sorted(_SKINS.keys()))


def is_known_skin(name: str) -> bool:
    return str(name).strip().lower() in _SKINS


def normalize_skin_name(name: str | None) -> str:
    """Return a valid skin name, falling back to default."""
    if not name:
        return DEFAULT_SKIN.name
    candidate = str(name).strip().lower()
    if candidate in _SKINS:
        return candidate
    return DEFAULT_SKIN.name


def resolve_skin(name: str | None, *, no_color: bool = False) -> Skin:
    """Return concrete skin for requested name and color mode."""
    if no_color:
        return PLAIN_SKIN
    return _SKINS[normalize_skin_name(name)]


class StyleListener(Protocol):
    def styles_changed(self, styles: Styles) -> None: ...


class Styles:
    """Current skin plus an explicit observer registry.

    Listeners are tracked by identity. ``dispatch`` marshals notifications onto
    the UI thread; without it listeners run inline on the caller's thread.
    """

    def __init__(
        self,
        skin: Skin = DEFAULT_SKIN,
        dispatch: Callable[[Callable[[], None]], None] | None = None,
    ) -> None:
        self._skin = skin
        self._dispatch = dispatch
        self._listeners: list[StyleListener] = []

    @property
    def skin(self) -> Skin:
        return self._skin

    def set_dispatch(self, dispatch: Callable[[Callable[[], None]], None] | None) -> None:
        self._dispatch = dispatch

    def add_listener(self, listener: StyleListener) -> None:
        """Register ``listener``; registering the same object twice is a no-op."""
        if self.has_listener(listener):
            return
        self._listeners.append(listener)

    def remove_listener(self, listener: StyleListener) -> None:
        """Unregister ``listener``; unknown listeners are ignored."""
        self._listeners = [existing for existing in self._listeners if existing is not listener]

    def has_listener(self, listener: StyleListener) -> bool:
        return any(existing is listener for existing in self._listeners)

    def listener_count(self) -> int:
        return len(self._listeners)

    def set_skin(self, skin: Skin) -> None:
        """Switch the active skin and broadcast the change."""
        self._skin = skin
        log.debug("skin changed to %s, notifying %d listener(s)", skin.name, len(self._listeners))
        self.fire_styles_changed()

    def fire_styles_changed(self) -> None:
        for listener in list(self._listeners):
            if self._dispatch is None:
                listener.styles_changed(self)
            else:
                self._dispatch(self._notifier(listener))

    def _notifier(self, listener: StyleListener) -> Callable[[], None]:
        def notify() -> None:
            # Listener may have been removed while the update was queued.
            if self.has_listener(listener):
                listener.styles_changed(self)

        return notify

    def bg_color(self) -> str:
        return self._skin.bg

    def fg_color(self) -> str:
        return self._skin.fg

    def border_color(self) -> str:
        return self._skin.border

    def border_focus_color(self) -> str:
        return self._skin.border_focus
