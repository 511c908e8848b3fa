"""Color-tag markup used by log text and skins.

Text may embed style tags of the form ``[fg:bg:attrs]`` where every part is
optional, ``-`` resets that part, and colors are names (``orange``) or
``#rrggbb`` values. ``["id"]`` tags delimit regions and render as nothing.
A tag can be escaped as ``[tag[]`` to print it literally.

Only tags naming known colors/attributes are interpreted, so bracketed log
fragments such as ``[INFO]`` or ``[12:00:01]`` stay verbatim.
"""

from __future__ import annotations

import re

# 256-color palette indices for supported color names.
NAMED_COLORS: dict[str, int] = {
    "black": 0,
    "maroon": 1,
    "green": 2,
    "olive": 3,
    "navy": 4,
    "purple": 5,
    "teal": 6,
    "silver": 7,
    "gray": 8,
    "grey": 8,
    "red": 9,
    "lime": 10,
    "yellow": 11,
    "blue": 12,
    "fuchsia": 13,
    "magenta": 13,
    "aqua": 14,
    "cyan": 14,
    "white": 15,
    "orange": 214,
    "orangered": 202,
    "darkorange": 208,
    "gold": 220,
    "khaki": 186,
    "papayawhip": 230,
    "pink": 218,
    "hotpink": 205,
    "violet": 177,
    "cadetblue": 73,
    "dodgerblue": 33,
    "steelblue": 67,
    "skyblue": 117,
    "lightskyblue": 117,
    "deepskyblue": 39,
    "royalblue": 62,
    "seagreen": 29,
    "springgreen": 48,
    "lightgreen": 120,
    "darkgray": 248,
    "darkgrey": 248,
    "lightgray": 252,
    "lightgrey": 252,
    "dimgray": 242,
    "slategray": 102,
    "darkslategray": 23,
    "midnightblue": 17,
}

ATTRIBUTE_CODES: dict[str, str] = {
    "b": "1",
    "d": "2",
    "i": "3",
    "u": "4",
    "l": "5",
    "r": "7",
    "s": "9",
}

_COLOR_PART = r"(?:[a-zA-Z]+|#[0-9a-fA-F]{6}|-)?"
_ATTR_PART = r"(?:[bdilrsu]+|-)?"
TAG_RE = re.compile(
    rf"\[(?P<fg>{_COLOR_PART})(?::(?P<bg>{_COLOR_PART})(?::(?P<attrs>{_ATTR_PART}))?)?\]"
)
REGION_RE = re.compile(r'\["[a-zA-Z0-9_,;: \-\.]*"\]')
ESCAPED_RE = re.compile(r"\[([a-zA-Z0-9_,;: \-\.\"#]*)\[\]")
_ANY_TAG_RE = re.compile(
    r'\["[a-zA-Z0-9_,;: \-\.]*"\]'
    r"|\[([a-zA-Z0-9_,;: \-\.\"#]*)\[\]"
    rf"|\[(?:{_COLOR_PART})(?::(?:{_COLOR_PART})(?::(?:{_ATTR_PART}))?)?\]"
)


def is_known_color(color: str) -> bool:
    """Return whether ``color`` is empty, a reset, a known name, or hex."""
    if color in {"", "-", "default"}:
        return True
    if color.startswith("#"):
        return len(color) == 7
    return color.lower() in NAMED_COLORS


def color_sgr(color: str, background: bool = False) -> str:
    """Return SGR parameters selecting ``color``.

    Empty, ``-`` and ``default`` select the terminal default color. Unknown
    names also fall back to the default.
    """
    base = 48 if background else 38
    if not color or color in {"-", "default"}:
        return str(base + 1)
    if color.startswith("#") and len(color) == 7:
        try:
            r = int(color[1:3], 16)
            g = int(color[3:5], 16)
            b = int(color[5:7], 16)
        except ValueError:
            return str(base + 1)
        return f"{base};2;{r};{g};{b}"
    index = NAMED_COLORS.get(color.lower())
    if index is None:
        return str(base + 1)
    return f"{base};5;{index}"


def sgr(fg: str = "", bg: str = "", attrs: str = "") -> str:
    """Build one full SGR escape for a foreground/background/attribute set."""
    params = ["0"]
    for flag in attrs:
        code = ATTRIBUTE_CODES.get(flag)
        if code is not None:
            params.append(code)
    if fg:
        params.append(color_sgr(fg))
    if bg:
        params.append(color_sgr(bg, background=True))
    return f"\033[{';'.join(params)}m"


def _is_style_tag(match: re.Match[str]) -> bool:
    fg = match.group("fg") or ""
    bg = match.group("bg") or ""
    attrs = match.group("attrs")
    if not fg and match.group("bg") is None and attrs is None:
        # "[]" is not a tag.
        return False
    return is_known_color(fg) and is_known_color(bg)


def translate_tags(text: str, base_fg: str = "", base_bg: str = "") -> str:
    """Replace color tags in ``text`` with ANSI SGR sequences.

    ``-`` resets a part back to ``base_fg``/``base_bg``. Region tags are
    dropped and escaped tags are unescaped.
    """
    if "[" not in text:
        return text

    fg, bg, attrs = base_fg, base_bg, ""
    out: list[str] = []
    pos = 0
    for match in _ANY_TAG_RE.finditer(text):
        tag = match.group(0)
        out.append(text[pos : match.start()])
        pos = match.end()
        if REGION_RE.fullmatch(tag):
            continue
        escaped = ESCAPED_RE.fullmatch(tag)
        if escaped is not None:
            out.append(f"[{escaped.group(1)}]")
            continue
        style = TAG_RE.fullmatch(tag)
        if style is None or not _is_style_tag(style):
            out.append(tag)
            continue
        new_fg = style.group("fg") or ""
        new_bg = style.group("bg") or ""
        new_attrs = style.group("attrs") or ""
        if new_fg == "-":
            fg = base_fg
        elif new_fg:
            fg = new_fg
        if new_bg == "-":
            bg = base_bg
        elif new_bg:
            bg = new_bg
        if new_attrs == "-":
            attrs = ""
        elif new_attrs:
            attrs = new_attrs
        out.append(sgr(fg, bg, attrs))
    out.append(text[pos:])
    return "".join(out)


def strip_tags(text: str) -> str:
    """Remove color and region tags, unescaping escaped tags."""
    if "[" not in text:
        return text

    out: list[str] = []
    pos = 0
    for match in _ANY_TAG_RE.finditer(text):
        tag = match.group(0)
        out.append(text[pos : match.start()])
        pos = match.end()
        if REGION_RE.fullmatch(tag):
            continue
        escaped = ESCAPED_RE.fullmatch(tag)
        if escaped is not None:
            out.append(f"[{escaped.group(1)}]")
            continue
        style = TAG_RE.fullmatch(tag)
        if style is not None and _is_style_tag(style):
            continue
        out.append(tag)
    out.append(text[pos:])
    return "".join(out)


def escape(text: str) -> str:
    """Escape tags in ``text`` so they render literally."""

    def _escape(match: re.Match[str]) -> str:
        tag = match.group(0)
        if ESCAPED_RE.fullmatch(tag):
            return tag
        return f"{tag[:-1]}[]"

    return _ANY_TAG_RE.sub(_escape, text)
