from __future__ import annotations

from typing import Callable, Iterable, Optional

import pytest

from zen_engine.buffer import Document
from zen_engine.editor import Editor
from zen_engine.modes.base_mode import KeyInput
from zen_engine.runtime.config import EditorConfig

from support import FakeClock, FakeTerminal, MemoryFiles

EditorFactory = Callable[..., Editor]


@pytest.fixture
def files() -> MemoryFiles:
    return MemoryFiles()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_editor(files: MemoryFiles, clock: FakeClock) -> EditorFactory:
    def factory(
        lines: Iterable[str] = (),
        *,
        input_keys: Iterable[KeyInput] = (),
        file_name: Optional[str] = None,
        config: Optional[EditorConfig] = None,
        width: int = 40,
        height: int = 12,
    ) -> Editor:
        terminal = FakeTerminal(input_keys, width=width, height=height)
        document = Document(lines, file_name=file_name, files=files)
        editor = Editor(
            terminal, document=document, config=config or EditorConfig(), clock=clock
        )
        editor.refresh_screen()
        return editor

    return factory
