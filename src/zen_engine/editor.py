"""Editor state and the synchronous read-dispatch-scroll-draw loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

from zen_engine import __version__
from zen_engine.actions.core import Command
from zen_engine.buffer import (
    Document,
    FileError,
    FileStore,
    HighlightClassifier,
    Position,
)
from zen_engine.host.terminal import Size, TerminalDevice, TerminalError
from zen_engine.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from zen_engine.modes.base_mode import EditorMode, KeyInput, ModeResult
from zen_engine.modes.dispatcher import Dispatcher
from zen_engine.modes.mode_manager import ModeManager
from zen_engine.modes.quit_guard import QuitGuard
from zen_engine.runtime import telemetry
from zen_engine.runtime.config import EditorConfig
from zen_engine.view import viewport
from zen_engine.view.prompt import PromptCallback, PromptSession
from zen_engine.view.renderer import STATUS_ROWS, Renderer
from zen_engine.view.status import Clock, StatusMessage
from zen_engine.view.viewport import Offset


@dataclass
class EditorState:
    """Everything one editing session mutates, owned by the control loop."""

    document: Document
    modes: ModeManager
    quit_guard: QuitGuard
    cursor: Position = field(default_factory=Position)
    offset: Offset = field(default_factory=Offset)
    status: StatusMessage = field(default_factory=StatusMessage)
    view_size: Size = field(default_factory=lambda: Size(80, 22))
    should_quit: bool = False

    @property
    def mode(self) -> EditorMode:
        return self.modes.active


class Editor:
    """Runs one document through a terminal device until the user quits."""

    def __init__(
        self,
        terminal: TerminalDevice,
        *,
        document: Optional[Document] = None,
        config: Optional[EditorConfig] = None,
        registry: Optional[KeymapRegistry] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.terminal = terminal
        self.config = config or EditorConfig.from_env()
        self._clock = clock
        if registry is None:
            registry = KeymapRegistry(logger_name="zen_engine.keymaps")
            load_default_keymaps(registry)
        self.dispatcher = Dispatcher(
            KeymapResolver(registry, logger_name="zen_engine.keymaps")
        )
        self.renderer = Renderer(self.config, version=__version__)
        self.state = EditorState(
            document=(
                document
                if document is not None
                else Document(tab_stop=self.config.tab_stop)
            ),
            modes=ModeManager(EditorMode(self.config.initial_mode)),
            quit_guard=QuitGuard(self.config.quit_times),
        )
        self.set_status(self.config.help_message)

    @classmethod
    def open(
        cls,
        terminal: TerminalDevice,
        path: Optional[str] = None,
        *,
        files: Optional[FileStore] = None,
        classifier: Optional[HighlightClassifier] = None,
        config: Optional[EditorConfig] = None,
        registry: Optional[KeymapRegistry] = None,
        clock: Clock = time.monotonic,
    ) -> "Editor":
        """Start on ``path``; an unreadable file leaves an empty unnamed buffer."""

        config = config or EditorConfig.from_env()
        document: Optional[Document] = None
        failure: Optional[FileError] = None
        if path:
            try:
                document = Document.open(
                    path, files=files, classifier=classifier, tab_stop=config.tab_stop
                )
            except FileError as exc:
                failure = exc
                telemetry.record_event(
                    "document.open_failed",
                    level="error",
                    data={"path": path, "reason": exc.reason},
                )
        if document is None:
            document = Document(files=files, classifier=classifier, tab_stop=config.tab_stop)
        editor = cls(
            terminal, document=document, config=config, registry=registry, clock=clock
        )
        if failure is not None:
            editor.set_status(f"ERR: Could not open file: {path}")
        return editor

    @property
    def modes(self) -> ModeManager:
        return self.state.modes

    # -- loop --------------------------------------------------------------

    def run(self) -> None:
        try:
            while True:
                self.refresh_screen()
                if self.state.should_quit:
                    break
                self.process_keypress()
        except TerminalError as exc:
            telemetry.record_event(
                "terminal.failure", level="error", data={"reason": str(exc)}
            )
            raise
        finally:
            self.terminal.restore()

    def process_keypress(self) -> ModeResult:
        return self.handle_key(self.terminal.read_key())

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.dispatcher.handle_key(self, key)
        self.scroll()
        return result

    def execute(self, command: Command) -> ModeResult:
        result = self.dispatcher.execute(self, command)
        self.scroll()
        return result

    def scroll(self) -> None:
        state = self.state
        state.offset = viewport.scroll(
            state.document, state.cursor, state.view_size, state.offset
        )

    def refresh_screen(self) -> None:
        size = self.terminal.size()
        self.state.view_size = Size(
            width=max(size.width, 0), height=max(size.height - STATUS_ROWS, 0)
        )
        self.renderer.draw(self.terminal, self.state, now=self._clock())

    # -- status & prompt ---------------------------------------------------

    def set_status(self, text: str) -> None:
        self.state.status = StatusMessage.from_text(text, clock=self._clock)

    def prompt(self, label: str, callback: Optional[PromptCallback] = None) -> Optional[str]:
        """Block on the terminal until Enter or Escape, redrawing after each key.

        Returns ``None`` when cancelled or when nothing was typed.
        """

        session = PromptSession(label, callback)
        while session.active:
            self.set_status(session.display)
            self.refresh_screen()
            session.feed(self.terminal.read_key())
        self.set_status("")
        return session.result


__all__ = ["Editor", "EditorState"]
