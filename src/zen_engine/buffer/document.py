"""Document: ordered lines plus file identity, dirty state and search."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from zen_engine.runtime import telemetry
from zen_engine.runtime.config import TAB_STOP

from .errors import NoFileName
from .files import FileStore, LocalFileStore
from .highlight import FileType, HighlightClassifier, detect_file_type
from .line import Line
from .state import Position, SearchDirection
from .validation import ensure_position


class Document:
    """Ordered sequence of :class:`Line` objects backing one editing session.

    An empty document (no lines) is valid; the cursor then sits on the
    past-end row ``0`` and the first insert creates a line.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        file_name: Optional[str] = None,
        files: Optional[FileStore] = None,
        classifier: Optional[HighlightClassifier] = None,
        tab_stop: int = TAB_STOP,
    ) -> None:
        self._tab_stop = tab_stop
        self._lines: List[Line] = [Line(text, tab_stop=tab_stop) for text in lines]
        self._file_name = file_name
        self._file_type = detect_file_type(file_name)
        self._files: FileStore = files or LocalFileStore()
        self._dirty = False
        self.classifier = classifier
        self.search_query: Optional[str] = None
        self.search_direction: Optional[SearchDirection] = None

    @classmethod
    def open(
        cls,
        path: str,
        *,
        files: Optional[FileStore] = None,
        classifier: Optional[HighlightClassifier] = None,
        tab_stop: int = TAB_STOP,
    ) -> "Document":
        """Load ``path`` through the file collaborator; raises ``FileError``."""

        store = files or LocalFileStore()
        with telemetry.span(
            "document::open", component="document", metadata={"path": path}
        ) as handle:
            lines = store.open(path)
            handle.add_metadata("lines", len(lines))
        return cls(
            lines,
            file_name=path,
            files=store,
            classifier=classifier,
            tab_stop=tab_stop,
        )

    # -- identity ----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def lines(self) -> Sequence[Line]:
        return tuple(self._lines)

    def row(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def is_empty(self) -> bool:
        return not self._lines

    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @file_name.setter
    def file_name(self, value: Optional[str]) -> None:
        self._file_name = value
        self._file_type = detect_file_type(value)
        for line in self._lines:
            line.invalidate_highlight()

    @property
    def file_type(self) -> FileType:
        return self._file_type

    def text(self) -> str:
        return "\n".join(line.content for line in self._lines)

    # -- persistence -------------------------------------------------------

    def save(self) -> None:
        """Write every line to the backing file; raises ``NoFileName`` or ``FileError``."""

        if not self._file_name:
            raise NoFileName()
        with telemetry.span(
            "document::save",
            component="document",
            metadata={"path": self._file_name, "lines": len(self._lines)},
        ):
            self._files.save(self._file_name, [line.content for line in self._lines])
        self._dirty = False

    # -- editing -----------------------------------------------------------

    def insert(self, at: Position, ch: str) -> None:
        ensure_position(self, at)
        if at.y == len(self._lines):
            self._lines.append(Line(tab_stop=self._tab_stop))
        line = self._lines[at.y]
        if ch == "\n":
            self._lines.insert(at.y + 1, line.split(at.x))
        else:
            line.insert(at.x, ch)
        self._dirty = True

    def delete(self, at: Position) -> None:
        ensure_position(self, at)
        if at.y >= len(self._lines):
            return
        line = self._lines[at.y]
        if at.x == len(line):
            if at.y + 1 >= len(self._lines):
                return
            line.append(self._lines.pop(at.y + 1))
        else:
            line.delete(at.x)
        self._dirty = True

    # -- search & highlight ------------------------------------------------

    def find(
        self,
        query: str,
        at: Position,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[Position]:
        """Return the start of the next match of ``query`` from ``at``.

        Every row is visited once, beginning at ``at.y`` and wrapping around the
        document; the starting row is finally rechecked for the stretch before
        (Forward) or after (Backward) ``at.x`` so the scan ends where it began.
        The matched line's search span is set and every other search span is
        cleared.
        """

        self.clear_search_highlights()
        self.search_query = query or None
        self.search_direction = direction
        if not query or not self._lines:
            return None

        with telemetry.span(
            "document::find",
            component="document",
            metadata={"direction": direction.value, "length": len(query)},
        ) as handle:
            found = self._scan(query, self._search_origin(at, direction), direction)
            handle.add_metadata("found", found is not None)

        if found is not None:
            self._lines[found.y].mark_match(found.x, found.x + len(query))
        return found

    def _search_origin(self, at: Position, direction: SearchDirection) -> Position:
        if at.y < len(self._lines):
            return Position(x=min(at.x, len(self._lines[at.y])), y=at.y)
        if direction is SearchDirection.FORWARD:
            return Position(0, 0)
        last = len(self._lines) - 1
        return Position(x=len(self._lines[last]), y=last)

    def _scan(
        self, query: str, origin: Position, direction: SearchDirection
    ) -> Optional[Position]:
        count = len(self._lines)
        forward = direction is SearchDirection.FORWARD
        step = 1 if forward else -1

        for offset in range(count):
            y = (origin.y + step * offset) % count
            line = self._lines[y]
            if forward:
                x = line.find_forward(query, origin.x if offset == 0 else 0)
            else:
                x = line.find_backward(query, origin.x if offset == 0 else None)
            if x is not None:
                return Position(x=x, y=y)

        line = self._lines[origin.y]
        if forward:
            x = line.find_forward(query)
            if x is not None and x < origin.x:
                return Position(x=x, y=origin.y)
        else:
            x = line.find_backward(query)
            if x is not None and x + len(query) > origin.x:
                return Position(x=x, y=origin.y)
        return None

    def clear_search_highlights(self) -> None:
        for line in self._lines:
            line.clear_match()
        self.search_query = None
        self.search_direction = None

    def highlight(self, rows: range) -> None:
        """Refresh stale syntax spans for the lines in ``rows`` only."""

        start = max(rows.start, 0)
        stop = min(rows.stop, len(self._lines))
        for index in range(start, stop):
            line = self._lines[index]
            if line.highlight_stale:
                line.highlight(self.classifier, self._file_type)


__all__ = ["Document"]
