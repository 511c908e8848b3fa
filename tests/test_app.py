"""Application shell: key routing, input mode tracking, view stack, frames."""

from __future__ import annotations

import tempfile
import threading
import unittest
from pathlib import Path

from lazylog.ansi import strip_ansi
from lazylog.config import AppConfig
from lazylog.keys import KeyEvent
from lazylog.model import BufferKind, BufferState
from lazylog.styles import OCEAN_SKIN
from lazylog.ui.flash import FlashLevel
from lazylog.view import App, Logger

WIDTH = 40
HEIGHT = 10


class AppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.app = App(AppConfig(current_cluster="dev", dump_dir=Path(self._tmp.name), no_color=True))

    def _push_logger(self, title: str, text: str = "line one\nline two\n") -> Logger:
        logger = Logger(self.app, title=title)
        logger.set_text(text)
        self.app.inject(logger)
        return logger

    def _type(self, keys: list[str]) -> None:
        for key in keys:
            self.assertTrue(self.app.dispatch_key(key, WIDTH, HEIGHT))


class AppKeyRoutingTests(AppTestCase):
    def test_filter_typing_goes_through_prompt(self) -> None:
        logger = self._push_logger("logs")
        self._type(["/", "e", "r", "r"])

        self.assertEqual(logger.cmd_buff.text, "err")
        self.assertIs(self.app.input_mode, BufferKind.FILTER)
        self.assertIn("/err", strip_ansi(self.app.frame(WIDTH, HEIGHT)))

    def test_delete_key_reaches_view_erase_while_typing(self) -> None:
        logger = self._push_logger("logs")
        self._type(["/", "a", "b", "DELETE"])
        self.assertEqual(logger.cmd_buff.text, "a")

    def test_enter_pins_filter_and_hides_prompt(self) -> None:
        logger = self._push_logger("logs")
        self._type(["/", "x", "ENTER"])

        self.assertIs(logger.cmd_buff.state, BufferState.PINNED)
        self.assertFalse(self.app.prompt_visible)
        self.assertIsNone(self.app.input_mode)

    def test_slash_while_typing_is_text_not_reactivation(self) -> None:
        logger = self._push_logger("logs")
        self._type(["/", "a", "/"])
        self.assertEqual(logger.cmd_buff.text, "a/")

    def test_quit_keys_stop_the_loop(self) -> None:
        self._push_logger("logs")
        self.assertFalse(self.app.dispatch_key("q", WIDTH, HEIGHT))
        self.assertFalse(self.app.dispatch_key("CTRL_C", WIDTH, HEIGHT))

    def test_unbound_scroll_keys_fall_through_to_text_view(self) -> None:
        logger = self._push_logger("logs", "".join(f"row {i}\n" for i in range(50)))
        self.app.frame(WIDTH, HEIGHT)
        self._type(["j", "j"])
        self.assertEqual(logger.row_offset, 2)


class AppViewStackTests(AppTestCase):
    def test_escape_pops_to_previous_view_and_stops_it(self) -> None:
        first = self._push_logger("first")
        second = self._push_logger("second")
        self.assertTrue(self.app.styles.has_listener(second))

        self._type(["ESC"])

        self.assertIs(self.app.content.top(), first)
        self.assertFalse(self.app.styles.has_listener(second))
        self.assertTrue(self.app.styles.has_listener(first))

    def test_escape_on_last_view_keeps_it(self) -> None:
        only = self._push_logger("only")
        self._type(["ESC"])
        self.assertIs(self.app.content.top(), only)

    def test_escape_with_pinned_filter_does_not_pop(self) -> None:
        self._push_logger("first")
        second = self._push_logger("second")
        self._type(["/", "x", "ENTER", "ESC"])

        self.assertIs(self.app.content.top(), second)
        self.assertIs(second.cmd_buff.state, BufferState.INACTIVE)

    def test_prev_cmd_swallows_event(self) -> None:
        self._push_logger("first")
        self.assertIsNone(self.app.prev_cmd(KeyEvent("ESC")))


class AppStyleMarshallingTests(AppTestCase):
    def test_broadcast_from_worker_thread_is_queued_for_ui_thread(self) -> None:
        logger = self._push_logger("logs")
        worker = threading.Thread(target=self.app.styles.set_skin, args=(OCEAN_SKIN,))
        worker.start()
        worker.join()

        self.assertNotEqual(logger.background_color, OCEAN_SKIN.bg)
        self.assertEqual(self.app.drain_updates(), 1)
        self.assertEqual(logger.background_color, OCEAN_SKIN.bg)

    def test_broadcast_on_ui_thread_applies_inline(self) -> None:
        logger = self._push_logger("logs")
        self.app.styles.set_skin(OCEAN_SKIN)
        self.assertEqual(logger.text_color, OCEAN_SKIN.fg)
        self.assertEqual(self.app.drain_updates(), 0)


class AppFrameTests(AppTestCase):
    def test_frame_shows_title_body_and_hints(self) -> None:
        self._push_logger("logs")
        rows = strip_ansi(self.app.frame(WIDTH, HEIGHT)).split("\r\n")

        self.assertEqual(len(rows), HEIGHT)
        self.assertIn(" logs ", rows[0])
        self.assertIn("line one", rows[1])
        self.assertIn("<c> Copy", rows[-1])

    def test_flash_replaces_hint_line(self) -> None:
        self._push_logger("logs")
        self.app.flash.info("hello")
        rows = strip_ansi(self.app.frame(WIDTH, HEIGHT)).split("\r\n")
        self.assertIn("hello", rows[-1])
        self.assertNotIn("Copy", rows[-1])


class AppSkinWarningTests(unittest.TestCase):
    def test_unknown_skin_warns_and_falls_back(self) -> None:
        app = App(AppConfig(skin="neon"))
        message = app.flash.current()
        assert message is not None
        self.assertIs(message.level, FlashLevel.WARN)
        self.assertIn("neon", message.text)
        self.assertEqual(app.styles.skin.name, "default")

    def test_known_skin_starts_quietly(self) -> None:
        app = App(AppConfig(skin=" Ocean "))
        self.assertIsNone(app.flash.current())
        self.assertEqual(app.styles.skin.name, "ocean")


if __name__ == "__main__":
    unittest.main()
