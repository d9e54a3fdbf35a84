"""Error taxonomy for documents, lines and their file collaborator."""

from __future__ import annotations

from typing import Optional

from .state import Position


class ZenEngineError(Exception):
    """Base class for every error raised by the engine."""


class DocumentError(ZenEngineError):
    """Recoverable document-level failure, reported to the user."""


class FileError(DocumentError):
    """Raised when the file collaborator cannot read or write a document."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NoFileName(DocumentError):
    """Raised when saving a document that has no backing file name yet."""

    def __init__(self) -> None:
        super().__init__("Document has no file name")


class BufferValidationError(ZenEngineError, RuntimeError):
    """Raised when a caller hands the buffer out-of-range coordinates."""

    def __init__(self, message: str, *, position: Optional[Position] = None) -> None:
        super().__init__(message)
        self.position = position


class OutOfBounds(BufferValidationError):
    """Line-level contract violation; reaching it means a caller skipped a check."""

    def __init__(self, column: int, length: int) -> None:
        super().__init__(f"Column {column} out of range for line of length {length}")
        self.column = column
        self.length = length


__all__ = [
    "ZenEngineError",
    "DocumentError",
    "FileError",
    "NoFileName",
    "BufferValidationError",
    "OutOfBounds",
]
