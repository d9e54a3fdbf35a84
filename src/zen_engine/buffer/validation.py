"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import BufferValidationError
from .state import Position

if TYPE_CHECKING:  # pragma: no cover
    from .document import Document


def ensure_position(document: "Document", position: Position) -> Position:
    """Return ``position`` unchanged if it is a valid cursor for ``document``.

    The row may equal the line count (the "past end" row) only with column 0.
    """

    row, col = position.y, position.x
    if row > len(document):
        raise BufferValidationError("Row out of range", position=position)
    if row == len(document):
        if col != 0:
            raise BufferValidationError("Column out of range", position=position)
        return position
    line = document.row(row)
    if line is None or col > len(line):
        raise BufferValidationError("Column out of range", position=position)
    return position


__all__ = ["ensure_position"]
