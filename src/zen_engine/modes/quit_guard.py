"""Confirmation countdown protecting unsaved changes from an accidental quit."""

from __future__ import annotations

from dataclasses import dataclass, field

from zen_engine.runtime.config import QUIT_TIMES


@dataclass(slots=True)
class QuitGuard:
    required: int = QUIT_TIMES
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.required < 1:
            raise ValueError("required must be at least 1")
        self.remaining = self.required

    @property
    def armed(self) -> bool:
        """True while a quit attempt is waiting for more confirmations."""

        return self.remaining < self.required

    def attempt(self, dirty: bool) -> bool:
        """Register one quit request; return True when the editor may quit."""

        if not dirty:
            return True
        self.remaining -= 1
        return self.remaining <= 0

    def warning(self) -> str:
        return (
            "WARNING! File has unsaved changes. "
            f"Press Ctrl-Q {self.remaining} more times to quit."
        )

    def reset(self) -> bool:
        """Restore the full countdown; return whether it had been armed."""

        was_armed = self.armed
        self.remaining = self.required
        return was_armed


__all__ = ["QuitGuard"]
