"""ANSI-aware measurement and line shaping for the text view.

Rows produced here are rendered independently, so every row that starts
while a style is in effect is prefixed with the last SGR sequence seen.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the rendered column count of ``text`` ignoring escapes."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def last_sgr(text: str, initial: str = "") -> str:
    """Return the last SGR sequence in ``text`` (or ``initial`` if none)."""
    current = initial
    for match in ANSI_ESCAPE_RE.finditer(text):
        seq = match.group(0)
        if seq.endswith("m"):
            current = "" if seq in {RESET, "\033[m"} else seq
    return current


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escapes are kept verbatim; tabs become spaces so clipping matches cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` and pad it with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def wrap_ansi_line(text: str, width: int, carry: str = "") -> list[str]:
    """Wrap a styled line into rows of at most ``width`` columns.

    ``carry`` is the SGR sequence in effect before the line starts; it and any
    style switched on mid-line are re-emitted at the start of each row.
    """
    if width <= 0 or not text:
        return [carry] if carry else [""]

    rows: list[str] = []
    chunk: list[str] = [carry] if carry else []
    active = carry
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                chunk.append(seq)
                if seq.endswith("m"):
                    active = "" if seq in {RESET, "\033[m"} else seq
                i = match.end()
                continue

        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > width and col > 0:
            rows.append("".join(chunk))
            chunk = [active] if active else []
            col = 0
            w = char_display_width(ch, col)
        chunk.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    rows.append("".join(chunk))
    return rows


def build_screen_lines(rendered: str, width: int, wrap: bool = False) -> list[str]:
    """Split rendered output into screen rows without line terminators.

    Styles that are still in effect at the end of a line carry into the next
    line, matching how a terminal would paint the continuous text.
    """
    lines = rendered.splitlines()
    if not lines:
        return [""]

    rows: list[str] = []
    carry = ""
    for line in lines:
        if wrap:
            rows.extend(wrap_ansi_line(line, width, carry))
        else:
            rows.append(f"{carry}{line}" if carry else line)
        carry = last_sgr(line, carry)
    return rows
