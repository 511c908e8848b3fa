"""Host-side UI building blocks: text view, prompt, flash, view stack."""

from .flash import Flash, FlashLevel, FlashMessage
from .pages import Component, PageStack
from .prompt import Prompt
from .text_view import TextView

__all__ = [
    "Component",
    "Flash",
    "FlashLevel",
    "FlashMessage",
    "PageStack",
    "Prompt",
    "TextView",
]
