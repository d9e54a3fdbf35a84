"""Abstract commands and the verbs that execute them."""

from .command import open_command_line, submit_command_line
from .core import Command, CommandKind, quit_editor, switch_mode
from .cursor import (
    clamp_cursor,
    move_down,
    move_end_of_row,
    move_left,
    move_right,
    move_start_of_row,
    move_up,
)
from .document import save_document, search_document, write_document
from .edit import backspace, delete_char, insert_char
from .view import scroll_down, scroll_up

__all__ = [
    "Command",
    "CommandKind",
    "quit_editor",
    "switch_mode",
    "clamp_cursor",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_start_of_row",
    "move_end_of_row",
    "scroll_up",
    "scroll_down",
    "insert_char",
    "delete_char",
    "backspace",
    "save_document",
    "write_document",
    "search_document",
    "open_command_line",
    "submit_command_line",
]
