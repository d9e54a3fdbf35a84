"""Terminal device backed by a Textual app.

The editor loop runs in a worker thread and blocks in :meth:`read_key` on a
queue the app fills from its key events. Drawing calls compose a frame of
styled runs that :meth:`flush` hands to the app thread.
"""

from __future__ import annotations

import queue
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, cast

from rich.style import Style as RichStyle
from rich.text import Text
from wcwidth import wcwidth

from zen_engine.buffer.highlight import Style
from zen_engine.host.terminal import Size, TerminalError
from zen_engine.modes.base_mode import KeyInput, Keys

FOREGROUND: Dict[Style, str] = {
    Style.NUMBER: "red",
    Style.STRING: "green",
    Style.CHARACTER: "bright_green",
    Style.COMMENT: "grey50",
    Style.KEYWORD: "yellow",
    Style.TYPE: "cyan",
    Style.MATCH: "bold blue",
    Style.STATUS: "rgb(63,63,63)",
}

BACKGROUND: Dict[Style, str] = {
    Style.STATUS: "on rgb(239,239,239)",
}

_SPECIAL_KEYS: Dict[str, str] = {
    "escape": Keys.ESC,
    "enter": Keys.ENTER,
    "tab": Keys.TAB,
    "backspace": Keys.BACKSPACE,
    "delete": Keys.DELETE,
    "up": Keys.UP,
    "down": Keys.DOWN,
    "left": Keys.LEFT,
    "right": Keys.RIGHT,
    "home": Keys.HOME,
    "end": Keys.END,
    "pageup": Keys.PAGE_UP,
    "pagedown": Keys.PAGE_DOWN,
}


def normalize_key(key: str, character: Optional[str]) -> Optional[KeyInput]:
    """Translate a Textual key name/character pair into a ``KeyInput``."""

    if key in _SPECIAL_KEYS:
        name = _SPECIAL_KEYS[key]
        return KeyInput(name, text="\t" if name == Keys.TAB else None)
    if key.startswith("ctrl+"):
        return KeyInput(key[len("ctrl+") :], modifiers=("ctrl",))
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass
class _Run:
    text: str
    fg: Optional[Style]
    bg: Optional[Style]


@dataclass
class _Frame:
    rows: Dict[int, List[_Run]] = field(default_factory=dict)
    cursor: Tuple[int, int] = (0, 0)
    cursor_visible: bool = True


_CLOSE = object()


class TextualTerminal:
    """``TerminalDevice`` implementation fed by a Textual app.

    ``app`` needs ``size`` (with ``width``/``height``), ``call_from_thread``
    and ``show_frame(lines)``. Once the edit loop has called :meth:`restore`
    no further frames are sent; ending the app is left to its owner.
    """

    def __init__(self, app: Any, *, timeout_s: Optional[float] = None) -> None:
        self.app = app
        self._keys: "queue.Queue[object]" = queue.Queue()
        self._timeout_s = timeout_s
        self._frame = _Frame()
        self._fg: Optional[Style] = None
        self._bg: Optional[Style] = None
        self._closed = False
        self._restored = False

    # -- input -------------------------------------------------------------

    def feed(self, key: KeyInput) -> None:
        self._keys.put(key)

    @property
    def closed(self) -> bool:
        """True once the app has gone away and stopped feeding keys."""

        return self._closed

    def close(self) -> None:
        self._closed = True
        self._keys.put(_CLOSE)

    def read_key(self) -> KeyInput:
        try:
            item = self._keys.get(timeout=self._timeout_s)
        except queue.Empty as exc:
            raise TerminalError("Timed out waiting for a key") from exc
        if item is _CLOSE:
            raise TerminalError("Terminal closed")
        return cast(KeyInput, item)

    def size(self) -> Size:
        size = self.app.size
        return Size(width=int(size.width), height=int(size.height))

    # -- output ------------------------------------------------------------

    def clear_screen(self) -> None:
        self._frame.rows.clear()

    def clear_line(self) -> None:
        self._frame.rows[self._frame.cursor[1]] = []

    def set_cursor(self, x: int, y: int) -> None:
        self._frame.cursor = (x, y)

    def show_cursor(self) -> None:
        self._frame.cursor_visible = True

    def hide_cursor(self) -> None:
        self._frame.cursor_visible = False

    def write(self, text: str) -> None:
        row = self._frame.rows.setdefault(self._frame.cursor[1], [])
        row.append(_Run(text, self._fg, self._bg))

    def set_fg_style(self, style: Style) -> None:
        self._fg = style

    def reset_fg_style(self) -> None:
        self._fg = None

    def set_bg_style(self, style: Style) -> None:
        self._bg = style

    def reset_bg_style(self) -> None:
        self._bg = None

    def render_frame(self) -> List[Text]:
        height = self.size().height
        lines: List[Text] = []
        cursor_x, cursor_y = self._frame.cursor
        for y in range(height):
            line = Text(no_wrap=True, end="")
            for run in self._frame.rows.get(y, []):
                line.append(run.text, style=_rich_style(run.fg, run.bg))
            if self._frame.cursor_visible and y == cursor_y:
                _mark_cursor(line, cursor_x)
            lines.append(line)
        return lines

    def flush(self) -> None:
        if self._closed or self._restored:
            return
        self.app.call_from_thread(self.app.show_frame, self.render_frame())

    def restore(self) -> None:
        self._restored = True


def _rich_style(fg: Optional[Style], bg: Optional[Style]) -> RichStyle:
    parts = []
    if fg is not None and fg in FOREGROUND:
        parts.append(FOREGROUND[fg])
    if bg is not None and bg in BACKGROUND:
        parts.append(BACKGROUND[bg])
    return RichStyle.parse(" ".join(parts)) if parts else RichStyle.null()


def _mark_cursor(line: Text, cell: int) -> None:
    column = 0
    for index, ch in enumerate(line.plain):
        if column >= cell:
            line.stylize("reverse", index, index + 1)
            return
        column += max(wcwidth(ch), 0)
    line.append(" " * max(cell - column, 0))
    line.append(" ", style="reverse")


__all__ = ["TextualTerminal", "normalize_key", "FOREGROUND", "BACKGROUND"]
