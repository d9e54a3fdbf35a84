"""Highlight spans, style tags and the optional classifier collaborator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Protocol, Sequence


class Style(str, Enum):
    """Visual style identifiers; terminals decide what each one looks like."""

    NONE = "none"
    NUMBER = "number"
    STRING = "string"
    CHARACTER = "character"
    COMMENT = "comment"
    KEYWORD = "keyword"
    TYPE = "type"
    MATCH = "match"
    STATUS = "status"


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open ``[start, end)`` range of character offsets tagged with a style."""

    start: int
    end: int
    style: Style

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def covers(self, index: int) -> bool:
        return self.start <= index < self.end


class HighlightClassifier(Protocol):
    """Turns one line of raw text into syntax spans for a file type."""

    def __call__(
        self, content: str, file_type: "FileType"
    ) -> Iterable[HighlightSpan]: ...


@dataclass(frozen=True, slots=True)
class FileType:
    name: str
    extensions: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.name


PLAIN_TEXT = FileType(name="No filetype")

KNOWN_FILE_TYPES: tuple[FileType, ...] = (
    FileType("Rust", (".rs",)),
    FileType("Python", (".py", ".pyi")),
    FileType("C", (".c", ".h")),
    FileType("JavaScript", (".js", ".mjs")),
    FileType("TypeScript", (".ts",)),
    FileType("Markdown", (".md",)),
    FileType("TOML", (".toml",)),
    FileType("JSON", (".json",)),
)

_BY_EXTENSION: Mapping[str, FileType] = MappingProxyType(
    {ext: ft for ft in KNOWN_FILE_TYPES for ext in ft.extensions}
)


def detect_file_type(file_name: Optional[str]) -> FileType:
    if not file_name:
        return PLAIN_TEXT
    _, ext = os.path.splitext(file_name)
    return _BY_EXTENSION.get(ext.lower(), PLAIN_TEXT)


def normalize_spans(spans: Iterable[HighlightSpan], length: int) -> tuple[HighlightSpan, ...]:
    """Clip spans to ``[0, length)``, drop empty ones and order them by start."""

    clipped = []
    for span in spans:
        end = min(span.end, length)
        if span.start >= end:
            continue
        clipped.append(HighlightSpan(span.start, end, span.style))
    clipped.sort(key=lambda s: (s.start, s.end))
    return tuple(clipped)


def style_at(spans: Sequence[HighlightSpan], index: int) -> Style:
    """Return the style of the last span covering ``index``."""

    found = Style.NONE
    for span in spans:
        if span.start > index:
            break
        if span.covers(index):
            found = span.style
    return found


__all__ = [
    "Style",
    "HighlightSpan",
    "HighlightClassifier",
    "FileType",
    "PLAIN_TEXT",
    "KNOWN_FILE_TYPES",
    "detect_file_type",
    "normalize_spans",
    "style_at",
]
