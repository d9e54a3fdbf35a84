"""Editing modes, their transition table and the quit guard."""

from .base_mode import EditorMode, KeyInput, Keys, ModeResult
from .mode_manager import MODE_TRANSITIONS, ModeManager, next_mode
from .quit_guard import QuitGuard

__all__ = [
    "EditorMode",
    "KeyInput",
    "Keys",
    "ModeResult",
    "MODE_TRANSITIONS",
    "ModeManager",
    "next_mode",
    "QuitGuard",
]
