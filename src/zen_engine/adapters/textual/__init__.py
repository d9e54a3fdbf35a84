"""Textual host: a terminal device rendered into a Textual widget."""

from .terminal import TextualTerminal, normalize_key

__all__ = ["TextualTerminal", "normalize_key"]
