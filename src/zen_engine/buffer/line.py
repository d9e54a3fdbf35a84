"""A single logical line: raw text plus derived render data and highlights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from wcwidth import wcwidth

from zen_engine.runtime.config import TAB_STOP

from .errors import OutOfBounds
from .highlight import (
    FileType,
    HighlightClassifier,
    HighlightSpan,
    PLAIN_TEXT,
    Style,
    normalize_spans,
    style_at,
)

REPLACEMENT = "?"


@dataclass(frozen=True, slots=True)
class Segment:
    """Run of rendered text sharing one style."""

    text: str
    style: Style = Style.NONE


@dataclass(frozen=True, slots=True)
class _RenderCache:
    cells: Tuple[str, ...]
    columns: Tuple[int, ...]  # starting render column per character, plus the total
    text: str

    @property
    def width(self) -> int:
        return self.columns[-1]


class Line:
    """One line of the document.

    The rendered form (tabs expanded, wide characters measured) and the syntax
    spans are derived from the raw content. Every mutation drops the render
    cache and any search span and marks the syntax spans stale; the cache is
    rebuilt on the next render or measurement.
    """

    __slots__ = (
        "_content",
        "_tab_stop",
        "_cache",
        "_syntax_spans",
        "_search_spans",
        "_highlight_stale",
    )

    def __init__(self, content: str = "", *, tab_stop: int = TAB_STOP) -> None:
        self._content = content
        self._tab_stop = tab_stop
        self._cache: Optional[_RenderCache] = None
        self._syntax_spans: Tuple[HighlightSpan, ...] = ()
        self._search_spans: Tuple[HighlightSpan, ...] = ()
        self._highlight_stale = True

    def __len__(self) -> int:
        return len(self._content)

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return f"Line({self._content!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Line):
            return self._content == other._content
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def content(self) -> str:
        return self._content

    @property
    def highlight_stale(self) -> bool:
        return self._highlight_stale

    # -- editing -----------------------------------------------------------

    def insert(self, at: int, ch: str) -> None:
        if at < 0 or at > len(self._content):
            raise OutOfBounds(at, len(self._content))
        self._content = self._content[:at] + ch + self._content[at:]
        self._invalidate()

    def delete(self, at: int) -> None:
        if at < 0 or at >= len(self._content):
            return
        self._content = self._content[:at] + self._content[at + 1 :]
        self._invalidate()

    def split(self, at: int) -> "Line":
        if at < 0 or at > len(self._content):
            raise OutOfBounds(at, len(self._content))
        tail = Line(self._content[at:], tab_stop=self._tab_stop)
        self._content = self._content[:at]
        self._invalidate()
        return tail

    def append(self, other: "Line") -> None:
        self._content += other._content
        other._content = ""
        other._invalidate()
        self._invalidate()

    def _invalidate(self) -> None:
        self._cache = None
        self._search_spans = ()
        self._highlight_stale = True

    # -- measuring ---------------------------------------------------------

    def _render_cache(self) -> _RenderCache:
        if self._cache is None:
            self._cache = _build_cache(self._content, self._tab_stop)
        return self._cache

    @property
    def rendered(self) -> str:
        return self._render_cache().text

    def width(self) -> int:
        return self._render_cache().width

    def render_column(self, x: int) -> int:
        """Map a character offset to the render column where it starts."""

        columns = self._render_cache().columns
        return columns[max(0, min(x, len(columns) - 1))]

    # -- highlighting ------------------------------------------------------

    @property
    def spans(self) -> Tuple[HighlightSpan, ...]:
        """Syntax spans followed by search spans; later spans win on overlap."""

        return self._syntax_spans + self._search_spans

    @property
    def search_spans(self) -> Tuple[HighlightSpan, ...]:
        return self._search_spans

    def highlight(
        self,
        classifier: Optional[HighlightClassifier],
        file_type: FileType = PLAIN_TEXT,
    ) -> None:
        spans: Iterable[HighlightSpan] = ()
        if classifier is not None:
            spans = classifier(self._content, file_type)
        self._syntax_spans = normalize_spans(spans, len(self._content))
        self._highlight_stale = False

    def invalidate_highlight(self) -> None:
        self._highlight_stale = True

    def mark_match(self, start: int, end: int) -> None:
        self._search_spans = normalize_spans(
            (HighlightSpan(start, end, Style.MATCH),), len(self._content)
        )

    def clear_match(self) -> None:
        self._search_spans = ()

    # -- searching ---------------------------------------------------------

    def find_forward(self, query: str, start: int = 0) -> Optional[int]:
        index = self._content.find(query, start)
        return index if index >= 0 else None

    def find_backward(self, query: str, end: Optional[int] = None) -> Optional[int]:
        """Return the last match lying entirely before ``end``."""

        limit = len(self._content) if end is None else end
        index = self._content.rfind(query, 0, limit)
        return index if index >= 0 else None

    # -- rendering ---------------------------------------------------------

    def render(
        self,
        start: int = 0,
        end: Optional[int] = None,
        spans: Optional[Sequence[HighlightSpan]] = None,
    ) -> List[Segment]:
        """Return the styled segments visible between render columns ``start`` and ``end``.

        ``spans`` defaults to the line's own syntax and search spans. Wide
        characters cut by either edge are replaced with blanks.
        """

        cache = self._render_cache()
        stop = cache.width if end is None else end
        active = self.spans if spans is None else tuple(spans)
        segments: List[Segment] = []
        for index, cell in enumerate(cache.cells):
            col = cache.columns[index]
            cell_width = cache.columns[index + 1] - col
            if cell_width == 0:
                if not start < col <= stop:
                    continue
                text = cell
            else:
                visible = min(col + cell_width, stop) - max(col, start)
                if visible <= 0:
                    continue
                text = cell if visible == cell_width else " " * visible
            style = style_at(active, index)
            if segments and segments[-1].style is style:
                segments[-1] = Segment(segments[-1].text + text, style)
            else:
                segments.append(Segment(text, style))
        return segments

    def render_text(self, start: int = 0, end: Optional[int] = None) -> str:
        return "".join(segment.text for segment in self.render(start, end))


def _build_cache(content: str, tab_stop: int) -> _RenderCache:
    cells: List[str] = []
    columns: List[int] = [0]
    column = 0
    for ch in content:
        if ch == "\t":
            cell_width = tab_stop - (column % tab_stop)
            cell = " " * cell_width
        else:
            cell_width = wcwidth(ch)
            cell = ch
            if cell_width < 0:
                cell, cell_width = REPLACEMENT, 1
        cells.append(cell)
        column += cell_width
        columns.append(column)
    return _RenderCache(cells=tuple(cells), columns=tuple(columns), text="".join(cells))


__all__ = ["Line", "Segment"]
