"""Line-entry prompt state driven one key at a time."""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from zen_engine.modes.base_mode import KeyInput, Keys

PromptCallback = Callable[[KeyInput, str], None]


class PromptOutcome(str, Enum):
    CONTINUE = "continue"
    SUBMIT = "submit"
    CANCEL = "cancel"


def _ignore(key: KeyInput, text: str) -> None:
    del key, text


class PromptSession:
    """Accumulates input for a prompt such as ``Save as: `` or ``Search``.

    ``callback`` runs after every key that does not end the session, with
    the text typed so far. Enter submits, Escape cancels and clears.
    """

    def __init__(self, label: str, callback: Optional[PromptCallback] = None) -> None:
        self.label = label
        self.callback = callback or _ignore
        self._typed: List[str] = []
        self.outcome: Optional[PromptOutcome] = None

    @property
    def text(self) -> str:
        return "".join(self._typed)

    @property
    def display(self) -> str:
        return f"{self.label}{self.text}"

    @property
    def active(self) -> bool:
        return self.outcome is None

    @property
    def result(self) -> Optional[str]:
        """Submitted text, or ``None`` when cancelled or left empty."""

        if self.outcome is not PromptOutcome.SUBMIT or not self._typed:
            return None
        return self.text

    def feed(self, key: KeyInput) -> PromptOutcome:
        if self.outcome is not None:
            return self.outcome
        if key.key == Keys.ENTER and not key.modifiers:
            self.outcome = PromptOutcome.SUBMIT
            return self.outcome
        if key.key == Keys.ESC:
            self._typed.clear()
            self.outcome = PromptOutcome.CANCEL
            return self.outcome
        if key.key == Keys.BACKSPACE:
            if self._typed:
                self._typed.pop()
        elif key.is_printable:
            self._typed.append(key.text or "")
        self.callback(key, self.text)
        return PromptOutcome.CONTINUE


__all__ = ["PromptSession", "PromptOutcome", "PromptCallback"]
