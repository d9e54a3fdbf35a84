"""Viewport scrolling, status/prompt surface and screen rendering."""

from .prompt import PromptCallback, PromptOutcome, PromptSession
from .renderer import STATUS_ROWS, Renderer, fit_width
from .status import StatusMessage
from .viewport import Offset, recompute, render_cursor, scroll, visible_rows

__all__ = [
    "Offset",
    "recompute",
    "render_cursor",
    "scroll",
    "visible_rows",
    "StatusMessage",
    "PromptSession",
    "PromptOutcome",
    "PromptCallback",
    "Renderer",
    "STATUS_ROWS",
    "fit_width",
]
