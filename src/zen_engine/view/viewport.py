"""Scroll controller mapping the cursor to a visible window of the document."""

from __future__ import annotations

from dataclasses import dataclass

from zen_engine.buffer import Document, Position
from zen_engine.host.terminal import Size


@dataclass(frozen=True, slots=True)
class Offset:
    """Top-left corner of the viewport in render columns and line rows."""

    x: int = 0
    y: int = 0


def recompute(cursor: Position, size: Size, offset: Offset) -> Offset:
    """Return the smallest scroll that keeps ``cursor`` inside the window.

    ``cursor.x`` is a render column here. The offset only moves when the
    cursor leaves ``[offset, offset + size)`` on an axis.
    """

    return Offset(
        x=_scroll_axis(cursor.x, size.width, offset.x),
        y=_scroll_axis(cursor.y, size.height, offset.y),
    )


def _scroll_axis(position: int, extent: int, current: int) -> int:
    extent = max(extent, 1)
    if position < current:
        return position
    if position >= current + extent:
        return max(position - extent + 1, 0)
    return max(current, 0)


def render_cursor(document: Document, cursor: Position) -> Position:
    """Translate a buffer cursor into render columns for the scroll rule."""

    line = document.row(cursor.y)
    if line is None:
        return Position(x=0, y=cursor.y)
    return Position(x=line.render_column(cursor.x), y=cursor.y)


def scroll(document: Document, cursor: Position, size: Size, offset: Offset) -> Offset:
    return recompute(render_cursor(document, cursor), size, offset)


def visible_rows(offset: Offset, size: Size, line_count: int) -> range:
    return range(offset.y, min(offset.y + max(size.height, 0), line_count))


__all__ = ["Offset", "recompute", "render_cursor", "scroll", "visible_rows"]
