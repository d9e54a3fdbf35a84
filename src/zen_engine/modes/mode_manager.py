"""Mode state machine: which mode switches are legal and applying them."""

from __future__ import annotations

from typing import FrozenSet, Mapping, Optional, Tuple

from zen_engine.runtime import telemetry

from .base_mode import EditorMode

MODE_TRANSITIONS: Mapping[EditorMode, FrozenSet[EditorMode]] = {
    EditorMode.NORMAL: frozenset({EditorMode.INSERT, EditorMode.COMMAND}),
    EditorMode.INSERT: frozenset({EditorMode.NORMAL}),
    EditorMode.COMMAND: frozenset({EditorMode.NORMAL}),
}


def next_mode(current: EditorMode, requested: Optional[EditorMode]) -> EditorMode:
    """Pure transition function; illegal requests leave the mode unchanged."""

    if requested is None or requested is current:
        return current
    if requested in MODE_TRANSITIONS.get(current, frozenset()):
        return requested
    return current


class ModeManager:
    """Owns the active mode and records every switch."""

    def __init__(self, initial: EditorMode = EditorMode.INSERT) -> None:
        self._active = initial
        self._history: list[Tuple[EditorMode, EditorMode]] = []

    @property
    def active(self) -> EditorMode:
        return self._active

    @property
    def history(self) -> Tuple[Tuple[EditorMode, EditorMode], ...]:
        return tuple(self._history)

    def switch_mode(self, requested: EditorMode) -> bool:
        target = next_mode(self._active, requested)
        if target is self._active:
            return False
        previous = self._active
        self._active = target
        self._history.append((previous, target))
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "mode": target.value}
        )
        return True


__all__ = ["MODE_TRANSITIONS", "ModeManager", "next_mode"]
