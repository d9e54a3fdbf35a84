"""Abstract editor commands produced by key interpretation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from zen_engine.modes.base_mode import EditorMode, ModeResult
from zen_engine.runtime import telemetry

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor


class CommandKind(str, Enum):
    MOVE_UP = "cursor.move_up"
    MOVE_DOWN = "cursor.move_down"
    MOVE_LEFT = "cursor.move_left"
    MOVE_RIGHT = "cursor.move_right"
    MOVE_START = "cursor.move_start"
    MOVE_END = "cursor.move_end"
    PAGE_UP = "view.page_up"
    PAGE_DOWN = "view.page_down"
    INSERT = "edit.insert"
    DELETE = "edit.delete"
    BACKSPACE = "edit.backspace"
    SAVE = "document.save"
    SEARCH = "document.search"
    COMMAND_LINE = "command.line"
    SWITCH_MODE = "core.switch_mode"
    QUIT = "core.quit"


@dataclass(frozen=True, slots=True)
class Command:
    """Tagged command; ``char`` and ``mode`` carry the variant payloads."""

    kind: CommandKind
    char: Optional[str] = None
    mode: Optional[EditorMode] = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.INSERT and not self.char:
            raise ValueError("insert command requires a character")
        if self.kind is CommandKind.SWITCH_MODE and self.mode is None:
            raise ValueError("switch_mode command requires a target mode")

    @classmethod
    def insert(cls, char: str) -> "Command":
        return cls(CommandKind.INSERT, char=char)

    @classmethod
    def switch_mode(cls, mode: EditorMode) -> "Command":
        return cls(CommandKind.SWITCH_MODE, mode=mode)


def switch_mode(editor: "Editor", command: Command) -> ModeResult:
    if command.mode is None or not editor.modes.switch_mode(command.mode):
        return ModeResult(consumed=False, status="mode_unchanged")
    return ModeResult(
        consumed=True,
        switch_to=command.mode,
        message=f"enter_{command.mode.value}",
    )


def quit_editor(editor: "Editor", command: Command) -> ModeResult:
    del command
    state = editor.state
    guard = state.quit_guard
    if guard.attempt(state.document.is_dirty()):
        state.should_quit = True
        return ModeResult(consumed=True, status="quit")
    editor.set_status(guard.warning())
    telemetry.record_event(
        "quit.blocked", level="warning", data={"remaining": guard.remaining}
    )
    return ModeResult(consumed=True, status="quit_pending", message=guard.warning())


__all__ = ["CommandKind", "Command", "switch_mode", "quit_editor"]
