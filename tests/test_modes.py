from __future__ import annotations

import pytest

from zen_engine.modes import EditorMode, KeyInput, ModeManager, QuitGuard, next_mode


@pytest.mark.parametrize(
    "current,requested,expected",
    [
        (EditorMode.NORMAL, EditorMode.INSERT, EditorMode.INSERT),
        (EditorMode.NORMAL, EditorMode.COMMAND, EditorMode.COMMAND),
        (EditorMode.INSERT, EditorMode.NORMAL, EditorMode.NORMAL),
        (EditorMode.INSERT, EditorMode.COMMAND, EditorMode.INSERT),
        (EditorMode.COMMAND, EditorMode.NORMAL, EditorMode.NORMAL),
        (EditorMode.COMMAND, EditorMode.INSERT, EditorMode.COMMAND),
        (EditorMode.NORMAL, None, EditorMode.NORMAL),
    ],
)
def test_next_mode_transition_table(
    current: EditorMode, requested: EditorMode | None, expected: EditorMode
) -> None:
    assert next_mode(current, requested) is expected


def test_mode_manager_records_switches() -> None:
    manager = ModeManager(EditorMode.INSERT)

    assert manager.switch_mode(EditorMode.NORMAL)
    assert not manager.switch_mode(EditorMode.NORMAL)
    assert manager.switch_mode(EditorMode.COMMAND)

    assert manager.active is EditorMode.COMMAND
    assert manager.history == (
        (EditorMode.INSERT, EditorMode.NORMAL),
        (EditorMode.NORMAL, EditorMode.COMMAND),
    )


def test_mode_labels() -> None:
    assert EditorMode.INSERT.label == "INSERT"


def test_key_input_tokens() -> None:
    assert KeyInput.ctrl("Q").token == "ctrl+q"
    assert KeyInput("x", modifiers=("Shift", "ctrl", "shift")).modifiers == ("ctrl", "shift")
    assert KeyInput.char("a").is_printable
    assert not KeyInput.ctrl("a").is_printable
    assert not KeyInput("ENTER").is_printable
    with pytest.raises(ValueError):
        KeyInput("")


def test_quit_guard_counts_down_on_dirty_document() -> None:
    guard = QuitGuard(3)

    assert not guard.attempt(dirty=True)
    assert guard.warning().endswith("Press Ctrl-Q 2 more times to quit.")
    assert not guard.attempt(dirty=True)
    assert guard.attempt(dirty=True)


def test_quit_guard_allows_clean_quit_immediately() -> None:
    guard = QuitGuard(3)

    assert guard.attempt(dirty=False)
    assert not guard.armed


def test_quit_guard_reset_reports_if_armed() -> None:
    guard = QuitGuard(2)

    assert not guard.reset()
    guard.attempt(dirty=True)
    assert guard.armed
    assert guard.reset()
    assert guard.remaining == 2


def test_quit_guard_requires_positive_count() -> None:
    with pytest.raises(ValueError):
        QuitGuard(0)
