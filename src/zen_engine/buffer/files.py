"""File collaborator used by documents to load and persist their lines."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Protocol, Sequence

from .errors import FileError

LINE_TERMINATOR = "\n"


class FileStore(Protocol):
    """Reads and writes a document's backing file as a sequence of lines."""

    def open(self, path: str) -> List[str]:
        """Return every physical line of ``path`` without terminators."""
        ...

    def save(self, path: str, lines: Sequence[str]) -> None:
        """Replace the content of ``path`` with ``lines``, all or nothing."""
        ...


class LocalFileStore:
    """UTF-8 files on the local file system, saved through an atomic rename."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def open(self, path: str) -> List[str]:
        try:
            with open(path, encoding=self.encoding, newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileError(path, _reason(exc)) from exc
        return split_lines(text)

    def save(self, path: str, lines: Sequence[str]) -> None:
        target = Path(path)
        content = "".join(f"{line}{LINE_TERMINATOR}" for line in lines)
        try:
            _atomic_write_text(target, content, encoding=self.encoding)
        except (OSError, UnicodeEncodeError) as exc:
            raise FileError(path, _reason(exc)) from exc


def split_lines(text: str) -> List[str]:
    r"""Split on ``\n`` only, dropping one trailing ``\r`` per line.

    A final terminator does not start another line, so ``save`` writes back
    what was read. Other control characters stay inside their line.
    """

    if not text:
        return []
    lines = text.split(LINE_TERMINATOR)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _atomic_write_text(path: Path, content: str, encoding: str) -> None:
    directory = path.parent if str(path.parent) else Path(".")
    fd, temp_path = tempfile.mkstemp(
        dir=directory,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            os.chmod(temp_path, path.stat().st_mode & 0o7777)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


__all__ = ["FileStore", "LocalFileStore", "LINE_TERMINATOR", "split_lines"]
