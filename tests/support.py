"""Test doubles for the terminal device, file collaborator and clock."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence

from zen_engine.buffer import FileError, Style
from zen_engine.host.terminal import Size, TerminalError
from zen_engine.modes.base_mode import KeyInput, Keys


class FakeTerminal:
    """Scripted key source that records the last drawn frame as plain rows."""

    def __init__(self, keys: Iterable[KeyInput] = (), *, width: int = 40, height: int = 12) -> None:
        self.keys = deque(keys)
        self.width = width
        self.height = height
        self.rows: Dict[int, str] = {}
        self.cursor = (0, 0)
        self.cursor_visible = True
        self.fg: Optional[Style] = None
        self.bg: Optional[Style] = None
        self.styled: List[tuple[str, Style]] = []
        self.flushes = 0
        self.restored = False

    def read_key(self) -> KeyInput:
        if not self.keys:
            raise TerminalError("no more scripted keys")
        return self.keys.popleft()

    def size(self) -> Size:
        return Size(self.width, self.height)

    def clear_screen(self) -> None:
        self.rows.clear()

    def clear_line(self) -> None:
        self.rows[self.cursor[1]] = ""

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def write(self, text: str) -> None:
        y = self.cursor[1]
        self.rows[y] = self.rows.get(y, "") + text
        if self.fg is not None:
            self.styled.append((text, self.fg))

    def set_fg_style(self, style: Style) -> None:
        self.fg = style

    def reset_fg_style(self) -> None:
        self.fg = None

    def set_bg_style(self, style: Style) -> None:
        self.bg = style

    def reset_bg_style(self) -> None:
        self.bg = None

    def flush(self) -> None:
        self.flushes += 1

    def restore(self) -> None:
        self.restored = True

    def line(self, y: int) -> str:
        return self.rows.get(y, "")


class MemoryFiles:
    """In-memory file collaborator."""

    def __init__(self, files: Optional[Dict[str, Sequence[str]]] = None) -> None:
        self.files: Dict[str, List[str]] = {k: list(v) for k, v in (files or {}).items()}
        self.fail_saves = False

    def open(self, path: str) -> List[str]:
        if path not in self.files:
            raise FileError(path, "No such file or directory")
        return list(self.files[path])

    def save(self, path: str, lines: Sequence[str]) -> None:
        if self.fail_saves:
            raise FileError(path, "Permission denied")
        self.files[path] = list(lines)


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def keys(*items: str | KeyInput) -> List[KeyInput]:
    """Build key events: plain strings are typed character by character."""

    result: List[KeyInput] = []
    for item in items:
        if isinstance(item, KeyInput):
            result.append(item)
        elif item in vars(Keys).values():
            result.append(KeyInput(item))
        else:
            result.extend(KeyInput.char(ch) for ch in item)
    return result


