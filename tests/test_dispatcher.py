from __future__ import annotations

from zen_engine.actions import Command, CommandKind
from zen_engine.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from zen_engine.modes import EditorMode, KeyInput, Keys
from zen_engine.modes.dispatcher import Dispatcher


def make_dispatcher() -> Dispatcher:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return Dispatcher(KeymapResolver(registry))


def test_interpret_is_mode_gated() -> None:
    dispatcher = make_dispatcher()

    assert dispatcher.interpret(EditorMode.INSERT, KeyInput.char("i")) == Command.insert("i")
    assert dispatcher.interpret(EditorMode.NORMAL, KeyInput.char("i")) == Command.switch_mode(
        EditorMode.INSERT
    )
    assert dispatcher.interpret(EditorMode.INSERT, KeyInput(Keys.ESC)) == Command.switch_mode(
        EditorMode.NORMAL
    )
    assert dispatcher.interpret(EditorMode.NORMAL, KeyInput(Keys.ESC)) is None


def test_interpret_control_keys_in_both_editing_modes() -> None:
    dispatcher = make_dispatcher()

    for mode in (EditorMode.NORMAL, EditorMode.INSERT):
        assert dispatcher.interpret(mode, KeyInput.ctrl("q")) == Command(CommandKind.QUIT)
        assert dispatcher.interpret(mode, KeyInput.ctrl("s")) == Command(CommandKind.SAVE)
        assert dispatcher.interpret(mode, KeyInput.ctrl("f")) == Command(CommandKind.SEARCH)


def test_enter_inserts_newline_only_in_insert_mode() -> None:
    dispatcher = make_dispatcher()

    assert dispatcher.interpret(EditorMode.INSERT, KeyInput(Keys.ENTER)) == Command.insert("\n")
    assert dispatcher.interpret(EditorMode.NORMAL, KeyInput(Keys.ENTER)) is None


def test_interpret_has_no_side_effects() -> None:
    dispatcher = make_dispatcher()

    first = dispatcher.interpret(EditorMode.NORMAL, KeyInput.char(":"))
    second = dispatcher.interpret(EditorMode.NORMAL, KeyInput.char(":"))

    assert first == second == Command(CommandKind.COMMAND_LINE)
    assert dispatcher.interpret(EditorMode.INSERT, KeyInput.char(":")) == Command.insert(":")
