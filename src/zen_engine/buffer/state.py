"""Cursor position and search direction shared across the buffer layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Position:
    """Buffer coordinates: ``x`` is a character offset, ``y`` a line index."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position cannot be negative: ({self.x}, {self.y})")

    def with_x(self, x: int) -> "Position":
        return Position(x=x, y=self.y)

    def with_y(self, y: int) -> "Position":
        return Position(x=self.x, y=y)


class SearchDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


__all__ = ["Position", "SearchDirection"]
