"""Action handlers and the (mode, key) table the resolver consults."""

from __future__ import annotations

from typing import ContextManager, Dict, Optional, Tuple

from zen_engine.actions.core import CommandKind
from zen_engine.modes.base_mode import EditorMode
from zen_engine.runtime.telemetry import SpanHandle, span

from .models import ActionRef, Binding

KeySlot = Tuple[EditorMode, str]


class KeymapConflictError(RuntimeError):
    """A binding claims a key that another binding already owns in that mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' on "
            f"{binding.mode.value}:{binding.key_signature}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """One executor per command kind plus at most one binding per key slot."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[CommandKind, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._slots: Dict[KeySlot, str] = {}
        self._logger_name = logger_name

    def _span(self, operation: str, **metadata: str) -> ContextManager[SpanHandle]:
        return span(
            f"keymaps::{operation}",
            logger_name=self._logger_name,
            component="keymaps",
            metadata=metadata,
        )

    # -- actions -----------------------------------------------------------

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with self._span("register_action", action_id=action.id):
            if action.kind in self._actions and not replace:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.kind] = action
        return action

    def get_action(self, kind: CommandKind) -> ActionRef:
        action = self._actions.get(kind)
        if action is None:
            raise KeyError(f"No action registered for '{kind.value}'")
        return action

    # -- bindings ----------------------------------------------------------

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with self._span(
            "register_binding", binding_id=binding.id, mode=binding.mode.value
        ) as handle:
            if binding.command.kind not in self._actions:
                handle.add_metadata("missing_action", binding.command.kind.value)
                raise KeyError(
                    f"Binding '{binding.id}' needs unregistered action "
                    f"'{binding.command.kind.value}'"
                )
            occupant = self.lookup(binding.mode, binding.key_signature)
            if not replace:
                if occupant is not None and occupant.id != binding.id:
                    handle.add_metadata("conflicts", occupant.id)
                    raise KeymapConflictError(binding, occupant)
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
            for stale in (occupant, self._bindings.get(binding.id)):
                if stale is not None:
                    self._drop(stale)
            self._add(binding)
        return binding

    def lookup(self, mode: EditorMode, token: str) -> Optional[Binding]:
        binding_id = self._slots.get((mode, token))
        return None if binding_id is None else self._bindings[binding_id]

    def _add(self, binding: Binding) -> None:
        self._bindings[binding.id] = binding
        self._slots[(binding.mode, binding.key_signature)] = binding.id

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        slot = (binding.mode, binding.key_signature)
        if self._slots.get(slot) == binding.id:
            del self._slots[slot]


__all__ = ["KeymapRegistry", "KeymapConflictError"]
