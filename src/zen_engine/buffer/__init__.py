"""Line/document data model, file collaborator and highlight spans."""

from .document import Document
from .errors import (
    BufferValidationError,
    DocumentError,
    FileError,
    NoFileName,
    OutOfBounds,
    ZenEngineError,
)
from .files import FileStore, LocalFileStore
from .highlight import (
    FileType,
    HighlightClassifier,
    HighlightSpan,
    PLAIN_TEXT,
    Style,
    detect_file_type,
)
from .line import Line, Segment
from .state import Position, SearchDirection
from .validation import ensure_position

__all__ = [
    "Document",
    "Line",
    "Segment",
    "Position",
    "SearchDirection",
    "FileStore",
    "LocalFileStore",
    "FileType",
    "HighlightClassifier",
    "HighlightSpan",
    "PLAIN_TEXT",
    "Style",
    "detect_file_type",
    "ZenEngineError",
    "DocumentError",
    "FileError",
    "NoFileName",
    "BufferValidationError",
    "OutOfBounds",
    "ensure_position",
]
