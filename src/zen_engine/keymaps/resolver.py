"""Mode-gated key interpretation: (mode, key) → abstract command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Literal, Optional

from zen_engine.actions.core import Command
from zen_engine.modes.base_mode import EditorMode, KeyInput
from zen_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

TEXT_ENTRY_MODES: FrozenSet[EditorMode] = frozenset({EditorMode.INSERT})


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver.

    ``"text"`` means no binding matched but the mode accepts printable input,
    so the key became an insert command.
    """

    status: Literal["match", "text", "miss"]
    command: Optional[Command] = None
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Looks keys up in the registry and falls back to text entry."""

    def __init__(
        self,
        registry: KeymapRegistry,
        *,
        text_modes: FrozenSet[EditorMode] = TEXT_ENTRY_MODES,
        logger_name: str | None = None,
    ) -> None:
        self._registry = registry
        self._text_modes = text_modes
        self._logger_name = logger_name

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: EditorMode, key: KeyInput) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode.value, "key": key.token},
        ) as handle:
            binding = self._registry.lookup(mode, KeyStroke.from_input(key).token)
            if binding is not None:
                action = self._registry.get_action(binding.command.kind)
                handle.add_metadata("status", "match")
                handle.add_metadata("binding_id", binding.id)
                return ResolutionResult(
                    status="match",
                    command=binding.command,
                    match=ResolutionMatch(binding=binding, action=action),
                )

            if mode in self._text_modes and key.is_printable:
                handle.add_metadata("status", "text")
                return ResolutionResult(
                    status="text", command=Command.insert(key.text or "")
                )

            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "TEXT_ENTRY_MODES",
]
