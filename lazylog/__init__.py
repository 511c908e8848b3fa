"""Terminal log viewer with an inline filter prompt and save/copy commands."""

__version__ = "0.1.0"
