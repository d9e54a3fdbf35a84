"""Key strokes, action executors and the bindings that join them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from zen_engine.actions.core import Command, CommandKind
from zen_engine.modes.base_mode import EditorMode, KeyInput


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """A key plus its modifiers, spelled the way ``KeyInput.token`` spells it."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        cleaned = {m.strip().lower() for m in self.modifiers if m.strip()}
        object.__setattr__(self, "modifiers", tuple(sorted(cleaned)))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+q"``; a bare or trailing ``+`` is the plus key itself."""

        head, sep, key = token.rpartition("+")
        if not sep or not head or not key:
            return cls(token)
        return cls(key, tuple(head.split("+")))

    @classmethod
    def from_input(cls, key: KeyInput) -> "KeyStroke":
        return cls(key.key, key.modifiers)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Executor for one command kind; called as ``handler(editor, command)``."""

    kind: CommandKind
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    @property
    def id(self) -> str:
        return self.kind.value

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    id: str
    mode: EditorMode
    stroke: KeyStroke
    command: Command
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        object.__setattr__(self, "mode", EditorMode(self.mode))

    @property
    def key_signature(self) -> str:
        return self.stroke.token

    @classmethod
    def of(
        cls,
        mode: EditorMode,
        token: str,
        command: Command,
        *,
        description: str = "",
    ) -> "Binding":
        """Build a binding whose id is ``"<mode>.<token>"``."""

        return cls(
            id=f"{mode.value}.{token}",
            mode=mode,
            stroke=KeyStroke.parse(token),
            command=command,
            description=description,
        )


__all__ = ["KeyStroke", "ActionRef", "Binding"]
