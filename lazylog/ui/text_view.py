"""Scrollable, color-tagged text rendering primitive.

The view owns display configuration (border, title, wrap, colors) and the
vertical scroll offset. Views built on top of it decide what text it shows.
"""

from __future__ import annotations

from ..ansi import RESET, build_screen_lines, display_width, pad_ansi_line
from ..colortags import sgr, strip_tags, translate_tags
from ..keys import KEY_CTRL_D, KEY_CTRL_U, KEY_DOWN, KEY_END, KEY_HOME, KEY_PGDN, KEY_PGUP, KEY_UP

BORDER_TOP_LEFT = "┌"
BORDER_TOP_RIGHT = "┐"
BORDER_BOTTOM_LEFT = "└"
BORDER_BOTTOM_RIGHT = "┘"
BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"


class TextView:
    def __init__(self) -> None:
        self.text = ""
        self.border = False
        self.title = ""
        self.title_color = ""
        self.scrollable = True
        self.wrap = True
        self.regions = False
        self.dynamic_colors = False
        self.highlight_color = ""
        self.background_color = ""
        self.text_color = ""
        self.border_color = ""
        self.border_focus_color = ""
        self.padding = (0, 0, 0, 0)
        self.row_offset = 0
        self._track_end = False
        self._cache_key: tuple[object, ...] | None = None
        self._cache_rows: list[str] = []

    # Configuration setters return ``self`` so they can be chained.

    def set_border(self, border: bool) -> TextView:
        self.border = border
        return self

    def set_title(self, title: str) -> TextView:
        self.title = title
        return self

    def set_title_color(self, color: str) -> TextView:
        self.title_color = color
        return self

    def set_scrollable(self, scrollable: bool) -> TextView:
        self.scrollable = scrollable
        if not scrollable:
            self._track_end = True
        return self

    def set_wrap(self, wrap: bool) -> TextView:
        self.wrap = wrap
        return self

    def set_regions(self, regions: bool) -> TextView:
        self.regions = regions
        return self

    def set_dynamic_colors(self, dynamic: bool) -> TextView:
        self.dynamic_colors = dynamic
        return self

    def set_highlight_color(self, color: str) -> TextView:
        self.highlight_color = color
        return self

    def set_background_color(self, color: str) -> TextView:
        self.background_color = color
        return self

    def set_text_color(self, color: str) -> TextView:
        self.text_color = color
        return self

    def set_border_color(self, color: str) -> TextView:
        self.border_color = color
        return self

    def set_border_focus_color(self, color: str) -> TextView:
        self.border_focus_color = color
        return self

    def set_border_padding(self, top: int, bottom: int, left: int, right: int) -> TextView:
        self.padding = (max(0, top), max(0, bottom), max(0, left), max(0, right))
        return self

    # Content

    def set_text(self, text: str) -> TextView:
        self.text = text
        self.row_offset = 0
        return self

    def write(self, text: str) -> None:
        """Append ``text`` to the current content."""
        self.text += text

    def clear(self) -> TextView:
        self.text = ""
        self.row_offset = 0
        return self

    def get_text(self, stripped: bool) -> str:
        """Return the full content; ``stripped`` removes color and region tags."""
        if stripped and (self.dynamic_colors or self.regions):
            return strip_tags(self.text)
        return self.text

    # Geometry

    def inner_size(self, width: int, height: int) -> tuple[int, int]:
        top, bottom, left, right = self.padding
        frame = 2 if self.border else 0
        return max(1, width - frame - left - right), max(1, height - frame - top - bottom)

    def screen_lines(self, width: int) -> list[str]:
        """Return rendered body rows for an inner width of ``width`` columns."""
        key = (self.text, width, self.wrap, self.dynamic_colors, self.text_color, self.background_color)
        if key != self._cache_key:
            if self.dynamic_colors:
                rendered = translate_tags(self.text, self.text_color, self.background_color)
            elif self.regions:
                rendered = strip_tags(self.text)
            else:
                rendered = self.text
            self._cache_rows = build_screen_lines(rendered, width, wrap=self.wrap)
            self._cache_key = key
        return self._cache_rows

    def max_offset(self, width: int, height: int) -> int:
        inner_width, inner_height = self.inner_size(width, height)
        return max(0, len(self.screen_lines(inner_width)) - inner_height)

    # Scrolling

    def scroll_to_beginning(self) -> None:
        self._track_end = False
        self.row_offset = 0

    def scroll_to_end(self) -> None:
        self._track_end = True

    def scroll_by(self, delta: int, width: int, height: int) -> None:
        top = self.max_offset(width, height)
        current = top if self._track_end else self.row_offset
        self.row_offset = max(0, min(top, current + delta))
        self._track_end = False

    def handle_key(self, key: str, width: int, height: int) -> bool:
        """Apply scroll keys; return whether ``key`` was consumed."""
        if not self.scrollable:
            return False
        _, page = self.inner_size(width, height)
        if key in {KEY_UP, "k"}:
            self.scroll_by(-1, width, height)
        elif key in {KEY_DOWN, "j"}:
            self.scroll_by(1, width, height)
        elif key in {KEY_PGUP, KEY_CTRL_U}:
            self.scroll_by(-page, width, height)
        elif key in {KEY_PGDN, KEY_CTRL_D, " "}:
            self.scroll_by(page, width, height)
        elif key in {KEY_HOME, "g"}:
            self.scroll_to_beginning()
        elif key in {KEY_END, "G"}:
            self.scroll_to_end()
        else:
            return False
        return True

    # Rendering

    def display_title(self) -> str:
        return self.title

    def _border_row(self, width: int, left: str, right: str, color: str, title: str = "") -> str:
        inner = max(0, width - 2)
        label = ""
        if title:
            label_text = f" {title} "
            if display_width(label_text) > inner:
                label_text = label_text[:inner]
            label = f"{sgr(self.title_color, self.background_color, 'b')}{label_text}"
        fill = BORDER_HORIZONTAL * max(0, inner - display_width(label))
        base = sgr(color, self.background_color)
        return f"{base}{left}{label}{base}{fill}{right}{RESET}"

    def draw(self, width: int, height: int, focused: bool = True) -> list[str]:
        """Return exactly ``height`` rows, each ``width`` columns wide."""
        if width <= 0 or height <= 0:
            return []
        top, bottom, left, right = self.padding
        inner_width, inner_height = self.inner_size(width, height)
        rows = self.screen_lines(inner_width)
        max_offset = max(0, len(rows) - inner_height)
        if self._track_end or not self.scrollable:
            self.row_offset = max_offset
        self.row_offset = max(0, min(self.row_offset, max_offset))

        base = sgr(self.text_color, self.background_color)
        blank_inner = f"{base}{' ' * inner_width}"
        body: list[str] = [blank_inner] * top
        for row in rows[self.row_offset : self.row_offset + inner_height]:
            body.append(f"{base}{pad_ansi_line(row, inner_width)}")
        while len(body) < top + inner_height:
            body.append(blank_inner)
        body.extend([blank_inner] * bottom)

        pad_left = f"{base}{' ' * left}"
        pad_right = f"{base}{' ' * right}"
        if not self.border:
            return [f"{pad_left}{row}{pad_right}{RESET}" for row in body[:height]]

        color = self.border_focus_color if focused else self.border_color
        edge = sgr(color, self.background_color)
        out = [self._border_row(width, BORDER_TOP_LEFT, BORDER_TOP_RIGHT, color, self.display_title())]
        for row in body[: max(0, height - 2)]:
            out.append(f"{edge}{BORDER_VERTICAL}{pad_left}{row}{pad_right}{edge}{BORDER_VERTICAL}{RESET}")
        if height > 1:
            out.append(self._border_row(width, BORDER_BOTTOM_LEFT, BORDER_BOTTOM_RIGHT, color))
        return out
