from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, List, Tuple

import pytest

from zen_engine.adapters.textual import TextualTerminal, normalize_key
from zen_engine.adapters.textual.app import _parse_args, run_to_exit
from zen_engine.buffer import Document, Style
from zen_engine.editor import Editor
from zen_engine.host.terminal import Size, TerminalError
from zen_engine.modes import KeyInput, Keys
from zen_engine.runtime.config import EditorConfig

from support import MemoryFiles


class StubApp:
    """Stands in for the Textual app: runs thread hand-offs inline."""

    def __init__(self, width: int = 20, height: int = 6) -> None:
        self.size = SimpleNamespace(width=width, height=height)
        self.frames: List[List[Any]] = []
        self.exits: List[Tuple[int, str | None]] = []

    def call_from_thread(self, callback: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return callback(*args, **kwargs)

    def show_frame(self, lines: List[Any]) -> None:
        self.frames.append(lines)

    def exit(
        self, result: Any = None, return_code: int = 0, message: str | None = None
    ) -> None:
        self.exits.append((return_code, message))


@pytest.mark.parametrize(
    "key,character,expected",
    [
        ("a", "a", KeyInput.char("a")),
        ("colon", ":", KeyInput.char(":")),
        ("escape", None, KeyInput(Keys.ESC)),
        ("enter", "\r", KeyInput(Keys.ENTER)),
        ("tab", "\t", KeyInput(Keys.TAB, text="\t")),
        ("pagedown", None, KeyInput(Keys.PAGE_DOWN)),
        ("ctrl+q", None, KeyInput.ctrl("q")),
        ("f5", None, None),
    ],
)
def test_normalize_key(key: str, character: str | None, expected: KeyInput | None) -> None:
    assert normalize_key(key, character) == expected


def test_terminal_reports_app_size() -> None:
    terminal = TextualTerminal(StubApp(width=33, height=9))

    assert terminal.size() == Size(33, 9)


def test_read_key_returns_fed_keys_in_order() -> None:
    terminal = TextualTerminal(StubApp())
    terminal.feed(KeyInput.char("a"))
    terminal.feed(KeyInput(Keys.ENTER))

    assert terminal.read_key() == KeyInput.char("a")
    assert terminal.read_key() == KeyInput(Keys.ENTER)


def test_read_key_fails_after_close_or_timeout() -> None:
    closed = TextualTerminal(StubApp())
    closed.close()
    with pytest.raises(TerminalError):
        closed.read_key()

    idle = TextualTerminal(StubApp(), timeout_s=0.01)
    with pytest.raises(TerminalError):
        idle.read_key()


def test_flush_hands_frame_to_app() -> None:
    app = StubApp(width=10, height=3)
    terminal = TextualTerminal(app)

    terminal.hide_cursor()
    terminal.set_cursor(0, 1)
    terminal.write("hi")
    terminal.set_fg_style(Style.MATCH)
    terminal.write("!")
    terminal.reset_fg_style()
    terminal.flush()

    (frame,) = app.frames
    assert [line.plain for line in frame] == ["", "hi!", ""]
    assert [(span.start, span.end) for span in frame[1].spans] == [(2, 3)]


def test_cursor_is_drawn_in_reverse_video() -> None:
    app = StubApp(width=10, height=2)
    terminal = TextualTerminal(app)

    terminal.set_cursor(0, 0)
    terminal.write("ab")
    terminal.set_cursor(4, 0)
    terminal.show_cursor()
    terminal.flush()

    (frame,) = app.frames
    assert frame[0].plain == "ab   "


def test_restore_stops_frames_without_exiting_app() -> None:
    app = StubApp()
    terminal = TextualTerminal(app)

    terminal.restore()
    terminal.restore()
    terminal.flush()

    assert app.exits == []
    assert not terminal.closed
    assert app.frames == []


def test_editor_runs_against_textual_terminal() -> None:
    app = StubApp(width=30, height=8)
    terminal = TextualTerminal(app, timeout_s=0.05)
    for key in (KeyInput.char("h"), KeyInput.char("i"), KeyInput.ctrl("q")):
        terminal.feed(key)
    editor = Editor(
        terminal, document=Document(files=MemoryFiles()), config=EditorConfig()
    )

    with pytest.raises(TerminalError):
        editor.run()

    assert [line.content for line in editor.state.document] == ["hi"]
    assert app.exits == []
    assert app.frames[-1][0].plain.startswith("hi")


def test_parse_args() -> None:
    args = _parse_args(["notes.txt", "--mode", "normal", "--log-preset", "development"])

    assert args.path == "notes.txt"
    assert args.mode == "normal"
    assert args.log_preset == "development"


def _editor_on(terminal: TextualTerminal) -> Editor:
    return Editor(terminal, document=Document(files=MemoryFiles()), config=EditorConfig())


def test_clean_quit_exits_app_with_status_zero() -> None:
    app = StubApp(width=30, height=8)
    terminal = TextualTerminal(app, timeout_s=0.05)
    terminal.feed(KeyInput.ctrl("q"))
    editor = _editor_on(terminal)

    run_to_exit(app, editor, terminal)

    assert editor.state.should_quit
    assert app.exits == [(0, None)]


def test_loop_failure_exits_app_with_status_one() -> None:
    app = StubApp(width=30, height=8)
    terminal = TextualTerminal(app, timeout_s=0.01)

    run_to_exit(app, _editor_on(terminal), terminal)

    ((code, message),) = app.exits
    assert code == 1
    assert message is not None and message.startswith("zen: TerminalError:")


def test_loop_failure_after_app_closed_does_not_exit_again() -> None:
    app = StubApp(width=30, height=8)
    terminal = TextualTerminal(app)
    terminal.close()

    run_to_exit(app, _editor_on(terminal), terminal)

    assert app.exits == []
