"""Page-wise scrolling by one viewport height."""

from __future__ import annotations

from typing import TYPE_CHECKING

from zen_engine.modes.base_mode import ModeResult

from .core import Command
from .cursor import clamp_cursor

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor


def scroll_up(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    height = max(state.view_size.height, 1)
    state.cursor = clamp_cursor(state, state.cursor.y - height, state.cursor.x)
    return ModeResult(consumed=True, status="page_up")


def scroll_down(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    height = max(state.view_size.height, 1)
    state.cursor = clamp_cursor(state, state.cursor.y + height, state.cursor.x)
    return ModeResult(consumed=True, status="page_down")


__all__ = ["scroll_up", "scroll_down"]
