"""Editing modes, normalized key input and dispatch results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EditorMode(str, Enum):
    """Available editor modes; exactly one is active at a time."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.upper()


class Keys:
    """Names used for non-printable keys in :class:`KeyInput`."""

    ESC = "ESC"
    ENTER = "ENTER"
    TAB = "TAB"
    BACKSPACE = "BACKSPACE"
    DELETE = "DELETE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    HOME = "HOME"
    END = "END"
    PAGE_UP = "PAGEUP"
    PAGE_DOWN = "PAGEDOWN"


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event read from a terminal device."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        normalized = tuple(sorted({m.strip().lower() for m in self.modifiers if m.strip()}))
        object.__setattr__(self, "modifiers", normalized)

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)

    @classmethod
    def ctrl(cls, key: str) -> "KeyInput":
        return cls(key=key.lower(), modifiers=("ctrl",))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        if self.modifiers or not self.text:
            return False
        return all(ch.isprintable() or ch == "\t" for ch in self.text)


@dataclass(slots=True)
class ModeResult:
    """Outcome of executing one command."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["EditorMode", "Keys", "KeyInput", "ModeResult"]
