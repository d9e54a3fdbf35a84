"""UI-agnostic text buffer and viewport engine for a terminal editor."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "editor",
    "host",
    "keymaps",
    "modes",
    "runtime",
    "view",
]

__version__ = "0.1.0"
