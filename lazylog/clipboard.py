"""System clipboard access through the platform's copy tools."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys


class ClipboardError(RuntimeError):
    """Raised when no clipboard tool accepted the text."""


def clipboard_commands() -> list[list[str]]:
    """Return candidate copy commands for the current platform, in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_to_clipboard(text: str) -> None:
    """Copy ``text`` using the first available clipboard tool.

    Raises :class:`ClipboardError` when no tool is installed or every
    available tool fails.
    """
    failures: list[str] = []
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            failures.append(f"{command[0]}: {exc}")
            continue
        if proc.returncode == 0:
            return
        detail = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        failures.append(f"{command[0]}: {detail}")

    if not failures:
        raise ClipboardError("no clipboard tool found")
    raise ClipboardError("clipboard copy failed (" + "; ".join(failures) + ")")
