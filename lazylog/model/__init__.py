"""Input-buffer models shared between views and the host prompt."""

from .buffer import BufferKind, BufferListener, BufferState, FishBuff

__all__ = [
    "BufferKind",
    "BufferListener",
    "BufferState",
    "FishBuff",
]
