"""Transient status message with lazy expiry."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable

Clock = Callable[[], float]


@dataclass(frozen=True, slots=True)
class StatusMessage:
    text: str = ""
    time: float = field(default_factory=monotonic)

    @classmethod
    def from_text(cls, text: str, *, clock: Clock = monotonic) -> "StatusMessage":
        return cls(text=text, time=clock())

    def is_visible(self, now: float, timeout_s: float) -> bool:
        """Messages simply stop showing once older than ``timeout_s``."""

        return bool(self.text) and now - self.time < timeout_s


__all__ = ["StatusMessage", "Clock"]
