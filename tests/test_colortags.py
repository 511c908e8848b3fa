"""Color-tag translation, stripping and escaping."""

from __future__ import annotations

import unittest

from lazylog import colortags


class TranslateTagsTests(unittest.TestCase):
    def test_named_and_hex_colors(self) -> None:
        self.assertEqual(colortags.translate_tags("[red]x"), "\033[0;38;5;9mx")
        self.assertEqual(
            colortags.translate_tags("[#ff8000:black]x"),
            "\033[0;38;2;255;128;0;48;5;0mx",
        )

    def test_dash_resets_to_base_colors(self) -> None:
        out = colortags.translate_tags("[red]a[-]b", base_fg="white")
        self.assertEqual(out, "\033[0;38;5;9ma\033[0;38;5;15mb")

    def test_attributes(self) -> None:
        self.assertEqual(colortags.translate_tags("[::b]x"), "\033[0;1mx")

    def test_log_brackets_are_left_alone(self) -> None:
        line = "[INFO] [12:00:01] started [worker-1]"
        self.assertEqual(colortags.translate_tags(line), line)
        self.assertEqual(colortags.strip_tags(line), line)

    def test_regions_are_dropped(self) -> None:
        self.assertEqual(colortags.translate_tags('["a"]x[""]'), "x")


class StripAndEscapeTests(unittest.TestCase):
    def test_strip_removes_styles_and_unescapes(self) -> None:
        self.assertEqual(colortags.strip_tags("[red]a[-] [b[]"), "a [b]")

    def test_escape_makes_tags_literal(self) -> None:
        escaped = colortags.escape("[red]x")
        self.assertEqual(escaped, "[red[]x")
        self.assertEqual(colortags.translate_tags(escaped), "[red]x")


class ColorSgrTests(unittest.TestCase):
    def test_defaults_and_unknown_colors(self) -> None:
        self.assertEqual(colortags.color_sgr(""), "39")
        self.assertEqual(colortags.color_sgr("-", background=True), "49")
        self.assertEqual(colortags.color_sgr("notacolor"), "39")
        self.assertEqual(colortags.color_sgr("Orange"), "38;5;214")

    def test_sgr_combines_parts(self) -> None:
        self.assertEqual(colortags.sgr("aqua", "black", "bu"), "\033[0;1;4;38;5;14;48;5;0m")
        self.assertEqual(colortags.sgr(), "\033[0m")


if __name__ == "__main__":
    unittest.main()
