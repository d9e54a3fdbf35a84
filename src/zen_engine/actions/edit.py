"""Text edits at the cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from zen_engine.modes.base_mode import ModeResult

from .core import Command
from .cursor import move_left, move_right

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor


def insert_char(editor: "Editor", command: Command) -> ModeResult:
    state = editor.state
    for ch in command.char or "":
        state.document.insert(state.cursor, ch)
        move_right(editor, command)
    return ModeResult(consumed=True, status="insert")


def delete_char(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    state.document.delete(state.cursor)
    return ModeResult(consumed=True, status="delete")


def backspace(editor: "Editor", command: Command) -> ModeResult:
    state = editor.state
    if state.cursor.x == 0 and state.cursor.y == 0:
        return ModeResult(consumed=True, status="noop")
    move_left(editor, command)
    state.document.delete(state.cursor)
    return ModeResult(consumed=True, status="delete")


__all__ = ["insert_char", "delete_char", "backspace"]
