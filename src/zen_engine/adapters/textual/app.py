"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from typing import Any, List, Optional, Sequence

from rich.console import Group
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from zen_engine.editor import Editor
from zen_engine.runtime import telemetry
from zen_engine.runtime.config import EditorConfig

from .terminal import TextualTerminal, normalize_key


def run_to_exit(app: Any, editor: Editor, terminal: TextualTerminal) -> None:
    """Run the edit loop on a worker thread, then end ``app``.

    A clean quit exits with status 0. An error escaping the loop exits with
    status 1 and the error as the exit message, unless the app is already
    shutting down and closed the terminal itself.
    """

    try:
        editor.run()
    except Exception as exc:
        telemetry.record_event(
            "editor.crashed",
            level="error",
            data={"error": exc.__class__.__name__, "reason": str(exc)},
        )
        if not terminal.closed:
            app.call_from_thread(
                app.exit,
                return_code=1,
                message=f"zen: {exc.__class__.__name__}: {exc}",
            )
        return
    app.call_from_thread(app.exit)


class ZenEditorApp(App[None], inherit_bindings=False):
    """Full-screen Textual host; every key goes to the editor loop."""

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }

    #screen {
        height: 1fr;
        padding: 0;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, *, path: Optional[str] = None, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self._path = path
        self._config = config or EditorConfig.from_env()
        self._screen_widget: Static | None = None
        self.terminal = TextualTerminal(self)
        self.editor: Editor | None = None

    def compose(self) -> ComposeResult:
        self._screen_widget = Static("", id="screen")
        yield self._screen_widget

    def on_mount(self) -> None:
        self.editor = Editor.open(self.terminal, self._path, config=self._config)
        self.run_worker(self._run_editor, thread=True, exclusive=True, exit_on_error=False)

    def on_unmount(self) -> None:
        self.terminal.close()

    def _run_editor(self) -> None:
        if self.editor is not None:
            run_to_exit(self, self.editor, self.terminal)

    def on_key(self, event: events.Key) -> None:
        key = normalize_key(event.key, event.character)
        event.stop()
        event.prevent_default()
        if key is not None:
            self.terminal.feed(key)

    def show_frame(self, lines: List[Text]) -> None:
        if self._screen_widget is not None:
            self._screen_widget.update(Group(*lines))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", help="File to open (optional)")
    parser.add_argument(
        "--mode",
        choices=("normal", "insert"),
        default=None,
        help="Mode to start in (default: insert)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=os.environ.get("ZEN_ENGINE_LOG_PRESET"),
        help="Telemetry preset to activate",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = EditorConfig.from_env().with_overrides(initial_mode=args.mode)
    app = ZenEditorApp(path=args.path, config=config)
    app.run()
    if app.return_code:
        raise SystemExit(app.return_code)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
