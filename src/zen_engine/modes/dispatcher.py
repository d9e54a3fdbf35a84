"""Command dispatcher: interprets keys under the active mode and executes them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from zen_engine.actions.core import Command, CommandKind
from zen_engine.keymaps import KeymapResolver
from zen_engine.runtime import telemetry

from .base_mode import EditorMode, KeyInput, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import Editor


class Dispatcher:
    """Turns raw keys into commands and runs them against the editor state."""

    def __init__(self, resolver: KeymapResolver) -> None:
        self.resolver = resolver

    def interpret(self, mode: EditorMode, key: KeyInput) -> Optional[Command]:
        """Pure (mode, key) → command mapping; ``None`` means the key is ignored."""

        return self.resolver.resolve(mode, key).command

    def handle_key(self, editor: "Editor", key: KeyInput) -> ModeResult:
        command = self.interpret(editor.state.mode, key)
        if command is None:
            return ModeResult(consumed=False, status="miss")
        return self.execute(editor, command)

    def execute(self, editor: "Editor", command: Command) -> ModeResult:
        action = self.resolver.registry.get_action(command.kind)
        with telemetry.span(
            name=f"dispatch::{command.kind.value}",
            component="dispatcher",
            metadata={"mode": editor.state.mode.value},
        ):
            outcome = action(editor, command)

        if command.kind is not CommandKind.QUIT and editor.state.quit_guard.reset():
            editor.set_status("")

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["Dispatcher"]
