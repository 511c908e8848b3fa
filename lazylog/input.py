"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into the key tokens defined in
:mod:`lazylog.keys`. Handles ESC-sequence timing and UTF-8 characters.
Escape sequences without a key mapping decode to ``""`` and are ignored.
"""

from __future__ import annotations

import os
import select

from .keys import (
    KEY_BACKSPACE,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_S,
    KEY_CTRL_U,
    KEY_CTRL_W,
    KEY_DELETE,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_ESC,
    KEY_HOME,
    KEY_LEFT,
    KEY_PGDN,
    KEY_PGUP,
    KEY_RIGHT,
    KEY_TAB,
    KEY_UP,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
CSI_MAX_PARAM_BYTES = 16
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": KEY_CTRL_C,
    b"\x04": KEY_CTRL_D,
    b"\x13": KEY_CTRL_S,
    b"\x15": KEY_CTRL_U,
    b"\x17": KEY_CTRL_W,
    b"\t": KEY_TAB,
    b"\x08": KEY_BACKSPACE,
    b"\x7f": KEY_BACKSPACE,
    b"\r": KEY_ENTER,
    b"\n": KEY_ENTER,
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": KEY_UP,
    b"B": KEY_DOWN,
    b"C": KEY_RIGHT,
    b"D": KEY_LEFT,
    b"H": KEY_HOME,
    b"F": KEY_END,
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": KEY_HOME,
    b"3": KEY_DELETE,
    b"4": KEY_END,
    b"5": KEY_PGUP,
    b"6": KEY_PGDN,
    b"7": KEY_HOME,
    b"8": KEY_END,
}
def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence.

    Parameter bytes are consumed up to the final byte (``@`` through ``~``),
    so an unmapped sequence never leaks characters into later keys.
    """
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return KEY_ESC if not params else ""
        if 0x40 <= part[0] <= 0x7E:
            break
        params += part
        if len(params) > CSI_MAX_PARAM_BYTES:
            return ""
    if part == b"~":
        return _CSI_TILDE_KEYS.get(params, "")
    if params:
        return ""
    return _CSI_FINAL_KEYS.get(part, "")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token, or ``""`` when ``timeout_ms`` elapses first."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        extra = _utf8_length(ch[0]) - 1
        data = ch
        for _ in range(extra):
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            data += more
        return data.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KEY_ESC
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return KEY_ESC
        return _CSI_FINAL_KEYS.get(final, "")
    _PENDING_BYTES.append(seq)
    return KEY_ESC
