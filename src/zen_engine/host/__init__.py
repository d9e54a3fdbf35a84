"""Host-side capabilities the engine consumes (terminal device)."""

from .terminal import Size, TerminalDevice, TerminalError

__all__ = ["Size", "TerminalDevice", "TerminalError"]
