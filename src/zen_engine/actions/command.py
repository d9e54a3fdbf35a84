"""Command-line mode: the ``:`` prompt and the Ex-style commands it evaluates."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from zen_engine.modes.base_mode import EditorMode, ModeResult
from zen_engine.runtime import telemetry

from .core import Command
from .document import save_document, write_document

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor

CommandHandler = Callable[["Editor", List[str]], ModeResult]

COMMAND_PROMPT = ":"


def open_command_line(editor: "Editor", command: Optional[Command] = None) -> ModeResult:
    """Switch to Command mode, read one line and evaluate it."""

    del command
    if not editor.modes.switch_mode(EditorMode.COMMAND):
        return ModeResult(consumed=False, status="mode_unchanged")
    try:
        line = editor.prompt(COMMAND_PROMPT)
        if line is None:
            return ModeResult(consumed=True, status="command_empty")
        return submit_command_line(editor, line)
    finally:
        editor.modes.switch_mode(EditorMode.NORMAL)


def submit_command_line(editor: "Editor", line: str) -> ModeResult:
    text = line.strip()
    telemetry.record_event("command.submit", data={"text": text})
    if not text:
        return ModeResult(consumed=True, status="command_empty")
    parts = text.split()
    name, args = parts[0], parts[1:]
    handler = _COMMAND_HANDLERS.get(name)
    if handler is None:
        return _unknown_command(editor, name)
    return handler(editor, args)


def _unknown_command(editor: "Editor", name: str) -> ModeResult:
    editor.set_status(f"Not an editor command: {name}")
    return ModeResult(consumed=True, status="command_error", message=name)


def _handle_echo(editor: "Editor", args: List[str]) -> ModeResult:
    message = " ".join(args)
    editor.set_status(message)
    return ModeResult(consumed=True, status="command_echo", message=message)


def _handle_write(editor: "Editor", args: List[str], *, force: bool = False) -> ModeResult:
    del force
    if args:
        editor.state.document.file_name = args[0]
        return write_document(editor)
    return save_document(editor)


def _handle_quit(editor: "Editor", args: List[str], *, force: bool = False) -> ModeResult:
    del args
    state = editor.state
    if state.document.is_dirty() and not force:
        editor.set_status("No write since last change (add ! to override)")
        return ModeResult(consumed=True, status="command_quit_blocked")
    state.should_quit = True
    return ModeResult(consumed=True, status="quit")


def _handle_wq(editor: "Editor", args: List[str], *, force: bool = False) -> ModeResult:
    result = _handle_write(editor, args)
    if result.status != "saved":
        return result
    return _handle_quit(editor, [], force=force)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "echo": _handle_echo,
    "write": _handle_write,
    "w": _handle_write,
    "write!": partial(_handle_write, force=True),
    "w!": partial(_handle_write, force=True),
    "quit": _handle_quit,
    "q": _handle_quit,
    "quit!": partial(_handle_quit, force=True),
    "q!": partial(_handle_quit, force=True),
    "wq": _handle_wq,
    "wq!": partial(_handle_wq, force=True),
    "x": _handle_wq,
    "exit": _handle_wq,
}


__all__ = ["COMMAND_PROMPT", "open_command_line", "submit_command_line"]
