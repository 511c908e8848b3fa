"""Frame composition for the single-view terminal layout.

Rendering is presentation-only: it reads view/prompt/flash state and returns
a fully composed ANSI frame without mutating anything but scroll clamping.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..actions import MenuHint
from ..ansi import RESET, pad_ansi_line
from ..colortags import sgr
from ..styles import Skin
from .flash import FlashLevel, FlashMessage
from .pages import Component

CLEAR_SCREEN = "\033[H"


@dataclass
class FrameContext:
    view: Component | None
    width: int
    height: int
    skin: Skin
    hints: list[MenuHint]
    prompt_line: str = ""
    prompt_suggestion: str = ""
    prompt_visible: bool = False
    flash: FlashMessage | None = None


def format_hints(hints: list[MenuHint], skin: Skin) -> str:
    """Render hints as ``<key> Description`` pairs."""
    parts = []
    for hint in hints:
        key = f"{sgr(skin.menu_key, '', 'b')}<{hint.display}>"
        desc = f"{sgr(skin.menu_desc)}{hint.description}"
        parts.append(f"{key} {desc}")
    return f"{RESET}  ".join(parts)


def format_flash(message: FlashMessage, skin: Skin) -> str:
    color = {
        FlashLevel.INFO: skin.flash_info,
        FlashLevel.WARN: skin.flash_warn,
        FlashLevel.ERR: skin.flash_err,
    }[message.level]
    prefix = {FlashLevel.INFO: "", FlashLevel.WARN: "! ", FlashLevel.ERR: "x "}[message.level]
    return f"{sgr(color, '', 'b')}{prefix}{message.text}"


def format_prompt(context: FrameContext) -> str:
    skin = context.skin
    base = sgr(skin.prompt_fg, skin.prompt_bg)
    line = f"{base}{context.prompt_line}"
    if context.prompt_suggestion:
        line += f"{sgr(skin.prompt_fg, skin.prompt_bg, 'd')}{context.prompt_suggestion}{base}"
    return line


def compose_rows(context: FrameContext) -> list[str]:
    """Return ``context.height`` rows for the view, prompt and status line."""
    width = max(1, context.width)
    height = max(1, context.height)
    chrome: list[str] = []
    if context.prompt_visible:
        chrome.append(format_prompt(context))
    if context.flash is not None:
        chrome.append(format_flash(context.flash, context.skin))
    else:
        chrome.append(format_hints(context.hints, context.skin))
    chrome = chrome[:height]

    view_height = height - len(chrome)
    rows: list[str] = []
    if context.view is not None and view_height > 0:
        rows = context.view.draw(width, view_height, focused=not context.prompt_visible)
    rows = rows[:view_height]
    while len(rows) < view_height:
        rows.append("")
    rows.extend(chrome)
    return [f"{pad_ansi_line(row, width)}{RESET}" for row in rows]


def render_frame(context: FrameContext) -> str:
    return CLEAR_SCREEN + "\r\n".join(compose_rows(context))


def write_frame(fd: int, frame: str) -> None:
    os.write(fd, frame.encode("utf-8", errors="replace"))
