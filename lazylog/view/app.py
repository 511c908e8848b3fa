"""Application shell hosting views, the prompt bar and the flash surface."""

from __future__ import annotations

import logging
import queue
import shutil
import threading
from collections.abc import Callable
from typing import Protocol

from ..config import AppConfig
from ..input import read_key
from ..keys import KEY_CTRL_C, KeyEvent
from ..model import BufferKind, FishBuff
from ..styles import Styles, is_known_skin, resolve_skin
from ..ui.flash import Flash
from ..ui.pages import Component, PageStack
from ..ui.prompt import Prompt
from ..ui.render import FrameContext, render_frame, write_frame
from ..ui.terminal import TerminalController

log = logging.getLogger(__name__)

QUIT_KEYS = frozenset({KEY_CTRL_C, "q"})
KEY_POLL_MS = 120


class View(Component, Protocol):
    def init(self, context: object = None) -> None: ...


class App:
    """Single-threaded host: routes keys, tracks input mode, draws frames."""

    def __init__(self, config: AppConfig, styles: Styles | None = None) -> None:
        self.config = config
        self.styles = styles if styles is not None else Styles(
            resolve_skin(config.skin, no_color=config.no_color)
        )
        self.flash = Flash()
        if config.skin and not is_known_skin(config.skin):
            self.flash.warn(f"Unknown skin {config.skin!r}, using default colors")
        self.prompt = Prompt()
        self.content = PageStack()
        self.prompt_visible = False
        self.input_mode: BufferKind | None = None
        self.dirty = True
        self._ui_thread = threading.get_ident()
        self._updates: queue.SimpleQueue[Callable[[], None]] = queue.SimpleQueue()
        self.styles.set_dispatch(self.queue_update)
        self.content.add_listener(lambda _top: self.mark_dirty())

    def mark_dirty(self) -> None:
        self.dirty = True

    # Thread marshalling

    def queue_update(self, update: Callable[[], None]) -> None:
        """Run ``update`` on the UI thread: inline when already there, else queued."""
        if threading.get_ident() == self._ui_thread:
            update()
            self.dirty = True
            return
        self._updates.put(update)

    def drain_updates(self) -> int:
        """Run queued cross-thread updates; return how many ran."""
        count = 0
        while True:
            try:
                update = self._updates.get_nowait()
            except queue.Empty:
                break
            update()
            count += 1
        if count:
            self.dirty = True
        return count

    # Services used by views

    def in_cmd_mode(self) -> bool:
        """Return whether some buffer already owns the prompt."""
        return self.prompt.in_cmd_mode()

    def reset_prompt(self, model: FishBuff) -> None:
        """Bind the prompt to ``model`` and start capturing input into it."""
        self.prompt.set_model(model)
        model.set_active(True)
        self.dirty = True

    def buffer_active(self, state: bool, kind: BufferKind) -> None:
        """Track global input mode as buffers start or stop capturing keys."""
        self.prompt_visible = state
        self.input_mode = kind if state else None
        log.debug("input mode %s", self.input_mode.value if self.input_mode else "none")
        self.dirty = True

    def prev_cmd(self, event: KeyEvent) -> KeyEvent | None:
        """Return to the previously displayed view, if there is one."""
        if not self.content.is_last():
            self.content.pop()
        return None

    def inject(self, view: View) -> None:
        """Initialize ``view`` and make it the active page."""
        view.init(self)
        self.content.push(view)

    # Input and rendering

    def dispatch_key(self, key: str, width: int, height: int) -> bool:
        """Route one key; return ``False`` when the app should quit."""
        self.dirty = True
        if self.prompt.handle_key(key):
            return True
        top = self.content.top()
        event: KeyEvent | None = KeyEvent(key)
        if top is not None:
            event = top.keyboard(event)
            if event is None:
                return True
            view_height = height - (2 if self.prompt_visible else 1)
            if top.handle_key(event.key, width, view_height):
                return True
        return event.key not in QUIT_KEYS

    def frame(self, width: int, height: int) -> str:
        top = self.content.top()
        return render_frame(
            FrameContext(
                view=top,
                width=width,
                height=height,
                skin=self.styles.skin,
                hints=top.hints() if top is not None else [],
                prompt_line=self.prompt.line() if self.prompt_visible else "",
                prompt_suggestion=self.prompt.suggestion() if self.prompt_visible else "",
                prompt_visible=self.prompt_visible,
                flash=self.flash.current(),
            )
        )

    def run(self, stdin_fd: int, stdout_fd: int) -> None:
        """Run the interactive loop until a quit key; stops every view on exit."""
        terminal = TerminalController(stdin_fd, stdout_fd)
        had_flash = False
        try:
            with terminal.raw_mode():
                while True:
                    self.drain_updates()
                    term = shutil.get_terminal_size((80, 24))
                    has_flash = self.flash.current() is not None
                    if has_flash != had_flash:
                        had_flash = has_flash
                        self.dirty = True
                    if self.dirty:
                        write_frame(stdout_fd, self.frame(term.columns, term.lines))
                        self.dirty = False
                    try:
                        key = read_key(stdin_fd, timeout_ms=KEY_POLL_MS)
                    except KeyboardInterrupt:
                        continue
                    if key == "":
                        continue
                    if not self.dispatch_key(key, term.columns, term.lines):
                        break
        finally:
            self.content.clear()
