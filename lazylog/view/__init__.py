"""Views and the application shell hosting them."""

from .app import App
from .logger import Logger

__all__ = ["App", "Logger"]
