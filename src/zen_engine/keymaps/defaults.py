"""Built-in actions and the default key table for each mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from zen_engine.actions import command as command_actions
from zen_engine.actions import core as core_actions
from zen_engine.actions import cursor as cursor_actions
from zen_engine.actions import document as document_actions
from zen_engine.actions import edit as edit_actions
from zen_engine.actions import view as view_actions
from zen_engine.actions.core import Command, CommandKind
from zen_engine.modes.base_mode import EditorMode, Keys

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(CommandKind.MOVE_UP, cursor_actions.move_up, "Move cursor up"),
    ActionRef(CommandKind.MOVE_DOWN, cursor_actions.move_down, "Move cursor down"),
    ActionRef(CommandKind.MOVE_LEFT, cursor_actions.move_left, "Move cursor left"),
    ActionRef(CommandKind.MOVE_RIGHT, cursor_actions.move_right, "Move cursor right"),
    ActionRef(
        CommandKind.MOVE_START, cursor_actions.move_start_of_row, "Start of row"
    ),
    ActionRef(CommandKind.MOVE_END, cursor_actions.move_end_of_row, "End of row"),
    ActionRef(CommandKind.PAGE_UP, view_actions.scroll_up, "Page up"),
    ActionRef(CommandKind.PAGE_DOWN, view_actions.scroll_down, "Page down"),
    ActionRef(CommandKind.INSERT, edit_actions.insert_char, "Insert character"),
    ActionRef(CommandKind.DELETE, edit_actions.delete_char, "Delete under cursor"),
    ActionRef(CommandKind.BACKSPACE, edit_actions.backspace, "Delete before cursor"),
    ActionRef(CommandKind.SAVE, document_actions.save_document, "Save document"),
    ActionRef(CommandKind.SEARCH, document_actions.search_document, "Find text"),
    ActionRef(
        CommandKind.COMMAND_LINE,
        command_actions.open_command_line,
        "Evaluate a command line",
    ),
    ActionRef(CommandKind.SWITCH_MODE, core_actions.switch_mode, "Switch mode"),
    ActionRef(CommandKind.QUIT, core_actions.quit_editor, "Quit"),
)

_NAVIGATION: tuple[tuple[str, CommandKind], ...] = (
    (Keys.UP, CommandKind.MOVE_UP),
    (Keys.DOWN, CommandKind.MOVE_DOWN),
    (Keys.LEFT, CommandKind.MOVE_LEFT),
    (Keys.RIGHT, CommandKind.MOVE_RIGHT),
    (Keys.HOME, CommandKind.MOVE_START),
    (Keys.END, CommandKind.MOVE_END),
    (Keys.PAGE_UP, CommandKind.PAGE_UP),
    (Keys.PAGE_DOWN, CommandKind.PAGE_DOWN),
    ("ctrl+s", CommandKind.SAVE),
    ("ctrl+f", CommandKind.SEARCH),
    ("ctrl+q", CommandKind.QUIT),
)


def _shared_bindings(mode: EditorMode) -> tuple[Binding, ...]:
    return tuple(Binding.of(mode, token, Command(kind)) for token, kind in _NAVIGATION)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *_shared_bindings(EditorMode.NORMAL),
    Binding.of(
        EditorMode.NORMAL,
        "i",
        Command.switch_mode(EditorMode.INSERT),
        description="Enter insert mode",
    ),
    Binding.of(
        EditorMode.NORMAL,
        ":",
        Command(CommandKind.COMMAND_LINE),
        description="Enter command-line mode",
    ),
    *_shared_bindings(EditorMode.INSERT),
    Binding.of(
        EditorMode.INSERT,
        Keys.ESC,
        Command.switch_mode(EditorMode.NORMAL),
        description="Leave insert mode",
    ),
    Binding.of(EditorMode.INSERT, Keys.ENTER, Command.insert("\n")),
    Binding.of(EditorMode.INSERT, Keys.DELETE, Command(CommandKind.DELETE)),
    Binding.of(EditorMode.INSERT, Keys.BACKSPACE, Command(CommandKind.BACKSPACE)),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
