"""Text view content, scrolling and drawing."""

from __future__ import annotations

import unittest

from lazylog.ansi import strip_ansi
from lazylog.keys import KEY_CTRL_D, KEY_CTRL_U, KEY_END, KEY_HOME, KEY_PGDN
from lazylog.ui.text_view import TextView


def _view(text: str) -> TextView:
    view = TextView().set_dynamic_colors(True).set_regions(True)
    view.set_text(text)
    return view


class TextViewContentTests(unittest.TestCase):
    def test_get_text_strips_tags_on_request(self) -> None:
        view = _view('[red]E[-] ["r1"]boom[""]\n')
        self.assertEqual(view.get_text(True), "E boom\n")
        self.assertEqual(view.get_text(False), '[red]E[-] ["r1"]boom[""]\n')

    def test_plain_view_keeps_brackets(self) -> None:
        view = TextView()
        view.set_text("[red]x")
        self.assertEqual(view.get_text(True), "[red]x")

    def test_write_appends(self) -> None:
        view = _view("a\n")
        view.write("b\n")
        self.assertEqual(view.get_text(True), "a\nb\n")


class TextViewScrollTests(unittest.TestCase):
    def setUp(self) -> None:
        self.view = _view("".join(f"line {i}\n" for i in range(20)))

    def test_scroll_keys_clamp_to_content(self) -> None:
        self.assertTrue(self.view.handle_key("k", 20, 5))
        self.assertEqual(self.view.row_offset, 0)
        self.view.handle_key("G", 20, 5)
        self.view.draw(20, 5)
        self.assertEqual(self.view.row_offset, 15)
        self.view.handle_key("DOWN", 20, 5)
        self.assertEqual(self.view.row_offset, 15)
        self.view.handle_key("PGUP", 20, 5)
        self.assertEqual(self.view.row_offset, 10)
        self.view.handle_key("g", 20, 5)
        self.assertEqual(self.view.row_offset, 0)

    def test_paging_keys_move_by_one_page(self) -> None:
        for key, expected in ((KEY_CTRL_D, 5), (KEY_PGDN, 10), (KEY_CTRL_U, 5), (KEY_END, None), (KEY_HOME, 0)):
            self.assertTrue(self.view.handle_key(key, 20, 5))
            if expected is not None:
                self.assertEqual(self.view.row_offset, expected)

    def test_unknown_keys_are_not_consumed(self) -> None:
        self.assertFalse(self.view.handle_key("c", 20, 5))

    def test_non_scrollable_view_follows_the_end(self) -> None:
        self.view.set_scrollable(False)
        rows = [strip_ansi(row) for row in self.view.draw(20, 3)]
        self.assertEqual([row.strip() for row in rows], ["line 17", "line 18", "line 19"])
        self.assertFalse(self.view.handle_key("k", 20, 3))


class TextViewDrawTests(unittest.TestCase):
    def test_border_title_and_padding(self) -> None:
        view = _view("hello\n").set_border(True).set_title("logs").set_border_padding(0, 0, 1, 1)
        rows = [strip_ansi(row) for row in view.draw(12, 4)]
        self.assertEqual(rows[0], "┌ logs ────┐")
        self.assertEqual(rows[1], "│ hello    │")
        self.assertEqual(rows[2], "│          │")
        self.assertEqual(rows[3], "└──────────┘")

    def test_wrap_splits_long_lines(self) -> None:
        view = _view("abcdefgh\n")
        rows = [strip_ansi(row) for row in view.draw(4, 3)]
        self.assertEqual(rows, ["abcd", "efgh", "    "])

    def test_color_tags_become_sgr(self) -> None:
        view = _view("[red]x\n")
        rows = view.draw(3, 1)
        self.assertIn("\033[0;38;5;9m", rows[0])


if __name__ == "__main__":
    unittest.main()
