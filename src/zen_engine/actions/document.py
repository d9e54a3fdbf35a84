"""Save and incremental search, both driven through the editor's prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from zen_engine.buffer import FileError, NoFileName, SearchDirection
from zen_engine.modes.base_mode import KeyInput, Keys, ModeResult
from zen_engine.runtime import telemetry

from .core import Command, CommandKind
from .cursor import move_left, move_right

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor

SAVE_PROMPT = "Save as: "
SEARCH_PROMPT = "Search (ESC to cancel, Arrows to navigate): "


def save_document(editor: "Editor", command: Optional[Command] = None) -> ModeResult:
    del command
    document = editor.state.document
    if document.file_name is None:
        new_name = editor.prompt(SAVE_PROMPT)
        if new_name is None:
            editor.set_status("Save aborted.")
            return ModeResult(consumed=True, status="save_aborted")
        document.file_name = new_name
    return write_document(editor)


def write_document(editor: "Editor") -> ModeResult:
    document = editor.state.document
    try:
        document.save()
    except NoFileName:
        editor.set_status("No file name")
        return ModeResult(consumed=True, status="save_failed")
    except FileError as exc:
        telemetry.record_event(
            "document.save_failed",
            level="error",
            data={"path": exc.path, "reason": exc.reason},
        )
        editor.set_status(f"Error writing file: {exc.reason}")
        return ModeResult(consumed=True, status="save_failed", message=exc.reason)
    editor.set_status("File saved successfully.")
    return ModeResult(consumed=True, status="saved")


def search_document(editor: "Editor", command: Optional[Command] = None) -> ModeResult:
    """Run the incremental search prompt; Escape restores the cursor."""

    state = editor.state
    command = command or Command(CommandKind.SEARCH)
    origin = state.cursor
    origin_offset = state.offset

    def on_key(key: KeyInput, query: str) -> None:
        moved = False
        if key.key in {Keys.RIGHT, Keys.DOWN}:
            direction = SearchDirection.FORWARD
            move_right(editor, command)
            moved = True
        elif key.key in {Keys.LEFT, Keys.UP}:
            direction = SearchDirection.BACKWARD
        else:
            direction = SearchDirection.FORWARD

        found = state.document.find(query, state.cursor, direction)
        if found is not None:
            state.cursor = found
            editor.scroll()
        elif moved:
            move_left(editor, command)

    query = editor.prompt(SEARCH_PROMPT, on_key)
    state.document.clear_search_highlights()
    if query is None:
        state.cursor = origin
        state.offset = origin_offset
        editor.scroll()
        return ModeResult(consumed=True, status="search_cancelled")
    return ModeResult(consumed=True, status="search", message=query)


__all__ = [
    "SAVE_PROMPT",
    "SEARCH_PROMPT",
    "save_document",
    "write_document",
    "search_document",
]
