"""Cursor movement commands in buffer coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from zen_engine.buffer import Position
from zen_engine.modes.base_mode import ModeResult

from .core import Command

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor, EditorState


def _line_length(state: "EditorState", row: int) -> int:
    line = state.document.row(row)
    return len(line) if line is not None else 0


def _last_row(state: "EditorState") -> int:
    return max(len(state.document) - 1, 0)


def clamp_cursor(state: "EditorState", row: int, col: int) -> Position:
    row = max(0, min(row, _last_row(state)))
    col = max(0, min(col, _line_length(state, row)))
    return Position(x=col, y=row)


def _moved(state: "EditorState", target: Position) -> ModeResult:
    state.cursor = target
    return ModeResult(consumed=True, status="cursor_move")


def move_up(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    x, y = state.cursor.x, state.cursor.y
    if y == 0:
        return _moved(state, state.cursor)
    return _moved(state, clamp_cursor(state, y - 1, x))


def move_down(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    x, y = state.cursor.x, state.cursor.y
    if y >= _last_row(state):
        return _moved(state, state.cursor)
    return _moved(state, clamp_cursor(state, y + 1, x))


def move_left(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    x, y = state.cursor.x, state.cursor.y
    if x > 0:
        return _moved(state, Position(x=x - 1, y=y))
    if y > 0:
        return _moved(state, Position(x=_line_length(state, y - 1), y=y - 1))
    return _moved(state, state.cursor)


def move_right(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    x, y = state.cursor.x, state.cursor.y
    if x < _line_length(state, y):
        return _moved(state, Position(x=x + 1, y=y))
    if y + 1 < len(state.document):
        return _moved(state, Position(x=0, y=y + 1))
    return _moved(state, state.cursor)


def move_start_of_row(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    return _moved(state, state.cursor.with_x(0))


def move_end_of_row(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    return _moved(state, state.cursor.with_x(_line_length(state, state.cursor.y)))


__all__ = [
    "clamp_cursor",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_start_of_row",
    "move_end_of_row",
]
