"""Regression tests for ANSI line-building primitives.

Focuses on wrapping and style carry-over between independently drawn rows.
"""

import unittest

from lazylog import ansi as ansi_mod

RED = "\033[0;38;5;9m"


class BuildScreenLinesTests(unittest.TestCase):
    def test_unwrapped_mode_drops_terminators(self) -> None:
        lines = ansi_mod.build_screen_lines("abcdef\nxy\n", width=3, wrap=False)
        self.assertEqual(lines, ["abcdef", "xy"])

    def test_wrapped_mode_splits_lines_to_width(self) -> None:
        lines = ansi_mod.build_screen_lines("abcdef\nxy\n", width=3, wrap=True)
        self.assertEqual(lines, ["abc", "def", "xy"])

    def test_wrapped_mode_handles_empty_input(self) -> None:
        self.assertEqual(ansi_mod.build_screen_lines("", width=5, wrap=True), [""])

    def test_style_carries_into_wrapped_rows_and_next_line(self) -> None:
        lines = ansi_mod.build_screen_lines(f"{RED}abcd\nef\n", width=2, wrap=True)
        self.assertEqual(lines, [f"{RED}ab", f"{RED}cd", f"{RED}ef"])

    def test_reset_stops_carry(self) -> None:
        lines = ansi_mod.build_screen_lines(f"{RED}a\033[0m\nb\n", width=5, wrap=False)
        self.assertEqual(lines, [f"{RED}a\033[0m", "b"])


class MeasureTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(ansi_mod.display_width(f"{RED}ab"), 2)
        self.assertEqual(ansi_mod.display_width("日本"), 4)

    def test_pad_clips_and_pads(self) -> None:
        self.assertEqual(ansi_mod.pad_ansi_line("abcdef", 4), "abcd")
        self.assertEqual(ansi_mod.pad_ansi_line("ab", 4), "ab  ")

    def test_tabs_expand_to_stops(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a\tb", 10), "a       b")


if __name__ == "__main__":
    unittest.main()
