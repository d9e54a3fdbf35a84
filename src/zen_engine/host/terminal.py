"""Terminal device capability consumed by the editor loop and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from zen_engine.buffer.errors import ZenEngineError
from zen_engine.buffer.highlight import Style

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.modes.base_mode import KeyInput


@dataclass(frozen=True, slots=True)
class Size:
    width: int
    height: int


class TerminalError(ZenEngineError, OSError):
    """Terminal I/O failed; the editor cannot continue without a terminal."""


class TerminalDevice(Protocol):
    """Opaque character terminal: key input, cursor control and styled output.

    Screen coordinates passed to ``set_cursor`` are zero-based ``(x, y)``
    cells. Styles are identifiers; the device chooses the colours.
    """

    def read_key(self) -> "KeyInput":
        """Block until the next key event arrives."""
        ...

    def size(self) -> Size: ...

    def clear_screen(self) -> None: ...

    def clear_line(self) -> None: ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def show_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def write(self, text: str) -> None: ...

    def set_fg_style(self, style: Style) -> None: ...

    def reset_fg_style(self) -> None: ...

    def set_bg_style(self, style: Style) -> None: ...

    def reset_bg_style(self) -> None: ...

    def flush(self) -> None: ...

    def restore(self) -> None:
        """Leave raw mode; called once when the edit loop ends for any reason."""
        ...


__all__ = ["Size", "TerminalDevice", "TerminalError"]
