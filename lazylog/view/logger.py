"""Generic log viewer view."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..actions import KeyActions, MenuHint, new_key_action, new_shared_key_action
from ..clipboard import ClipboardError, copy_to_clipboard
from ..dump import save_log
from ..keys import KEY_C, KEY_CTRL_S, KEY_DELETE, KEY_ESC, KEY_SLASH, KeyEvent, as_key
from ..model import BufferKind, FishBuff
from ..styles import Styles
from ..ui.text_view import TextView

if TYPE_CHECKING:
    from .app import App

log = logging.getLogger(__name__)


class Logger(TextView):
    """Scrollable log text with a filter prompt and save/copy commands."""

    def __init__(self, app: App, title: str = "") -> None:
        super().__init__()
        self.app = app
        self.title = title
        self.subject = ""
        self._actions = KeyActions()
        self.cmd_buff = FishBuff(KEY_SLASH, BufferKind.FILTER)
        self._styles_registered = False

    def init(self, context: object = None) -> None:
        """Configure the view and wire it to the app's styles and prompt.

        If wiring fails after the style registration, the registration is
        released before the error propagates.
        """
        if self.title:
            self.set_border(True)
        self.set_scrollable(True).set_wrap(True).set_regions(True)
        self.set_dynamic_colors(True)
        self.set_highlight_color("orange")
        self.set_title_color("aqua")
        self.set_border_padding(0, 0, 1, 1)

        self.app.styles.add_listener(self)
        self._styles_registered = True
        try:
            self.styles_changed(self.app.styles)
            self.app.prompt.set_model(self.cmd_buff)
            self.cmd_buff.add_listener(self)
            self.bind_keys()
        except Exception:
            self._release()
            raise

    # Buffer listener

    def buffer_changed(self, text: str, suggestion: str) -> None:
        """Called on every buffer edit."""

    def buffer_completed(self, text: str, suggestion: str) -> None:
        """Called when input is accepted."""

    def buffer_active(self, state: bool, kind: BufferKind) -> None:
        self.app.buffer_active(state, kind)

    # Keys

    def bind_keys(self) -> None:
        self._actions.set(
            {
                KEY_ESC: new_key_action("Back", self.reset_cmd, False),
                KEY_CTRL_S: new_key_action("Save", self.save_cmd, False),
                KEY_C: new_key_action("Copy", self.copy_cmd, True),
                KEY_SLASH: new_shared_key_action("Filter Mode", self.activate_cmd, False),
                KEY_DELETE: new_shared_key_action("Erase", self.erase_cmd, False),
            }
        )

    def keyboard(self, event: KeyEvent) -> KeyEvent | None:
        action = self._actions.get(as_key(event))
        if action is not None:
            return action.action(event)
        return event

    # Styles

    def styles_changed(self, styles: Styles) -> None:
        self.set_background_color(styles.bg_color())
        self.set_text_color(styles.fg_color())
        self.set_border_focus_color(styles.border_focus_color())

    # Component surface

    def set_subject(self, subject: str) -> None:
        self.subject = subject

    def display_title(self) -> str:
        if self.subject:
            return f"{self.title}({self.subject})"
        return self.title

    def actions(self) -> KeyActions:
        return self._actions

    def name(self) -> str:
        return self.title

    def start(self) -> None:
        pass

    def stop(self) -> None:
        self._release()

    def hints(self) -> list[MenuHint]:
        return self._actions.hints()

    def extra_hints(self) -> dict[str, str] | None:
        return None

    def _release(self) -> None:
        if self._styles_registered:
            self.app.styles.remove_listener(self)
            self._styles_registered = False
        self.cmd_buff.remove_listener(self)

    # Commands

    def activate_cmd(self, event: KeyEvent) -> KeyEvent | None:
        if self.app.in_cmd_mode():
            return event
        self.app.reset_prompt(self.cmd_buff)
        return None

    def erase_cmd(self, event: KeyEvent) -> KeyEvent | None:
        if not self.cmd_buff.is_active():
            return None
        self.cmd_buff.delete()
        return None

    def reset_cmd(self, event: KeyEvent) -> KeyEvent | None:
        if not self.cmd_buff.in_cmd_mode():
            self.cmd_buff.reset()
            return self.app.prev_cmd(event)
        self.cmd_buff.set_active(False)
        self.cmd_buff.reset()
        return None

    def save_cmd(self, event: KeyEvent) -> KeyEvent | None:
        config = self.app.config
        try:
            path = save_log(config.dump_dir, config.current_cluster, self.title, self.get_text(True))
        except (OSError, UnicodeError) as exc:
            log.warning("saving %r failed: %s", self.title, exc)
            self.app.flash.err(exc)
        else:
            self.app.flash.infof("Log %s saved successfully!", path)
        return None

    def copy_cmd(self, event: KeyEvent) -> KeyEvent | None:
        # Reported before the copy is confirmed; a failure replaces it.
        self.app.flash.info("Content copied to clipboard...")
        try:
            copy_to_clipboard(self.get_text(True))
        except (ClipboardError, OSError, UnicodeError) as exc:
            log.warning("clipboard copy failed: %s", exc)
            self.app.flash.err(exc)
        return None
