"""Draws the document window, status bar and message bar onto a terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wcwidth import wcswidth, wcwidth

from zen_engine.buffer import Line, Style
from zen_engine.host.terminal import TerminalDevice
from zen_engine.runtime.config import EditorConfig

from .viewport import render_cursor, visible_rows

if TYPE_CHECKING:  # pragma: no cover
    from zen_engine.editor import EditorState

STATUS_ROWS = 2
FILE_NAME_LIMIT = 20
NO_NAME = "[No Name]"


def fit_width(text: str, width: int) -> str:
    """Trim ``text`` so it occupies at most ``width`` terminal columns."""

    if width <= 0:
        return ""
    if max(wcswidth(text), len(text)) <= width:
        return text
    used = 0
    kept = []
    for ch in text:
        cell = max(wcwidth(ch), 0)
        if used + cell > width:
            break
        kept.append(ch)
        used += cell
    return "".join(kept)


def pad_line(text: str, width: int) -> str:
    text = fit_width(text, width)
    return text + " " * max(width - max(wcswidth(text), 0), 0)


class Renderer:
    def __init__(self, config: EditorConfig, *, version: str) -> None:
        self.config = config
        self.version = version

    def draw(self, terminal: TerminalDevice, state: "EditorState", *, now: float) -> None:
        terminal.hide_cursor()
        terminal.set_cursor(0, 0)
        if state.should_quit:
            terminal.clear_screen()
            terminal.write("Goodbye.")
        else:
            view = state.view_size
            state.document.highlight(
                visible_rows(state.offset, view, len(state.document))
            )
            self.draw_rows(terminal, state)
            self.draw_status_bar(terminal, state)
            self.draw_message_bar(terminal, state, now)
            cursor = render_cursor(state.document, state.cursor)
            terminal.set_cursor(
                max(cursor.x - state.offset.x, 0), max(cursor.y - state.offset.y, 0)
            )
        terminal.show_cursor()
        terminal.flush()

    def draw_rows(self, terminal: TerminalDevice, state: "EditorState") -> None:
        view = state.view_size
        document = state.document
        for terminal_row in range(view.height):
            terminal.set_cursor(0, terminal_row)
            terminal.clear_line()
            line = document.row(state.offset.y + terminal_row)
            if line is not None:
                self.draw_row(terminal, line, state.offset.x, view.width)
            elif document.is_empty() and terminal_row == view.height // 3:
                terminal.write(self.welcome_message(view.width))
            else:
                terminal.write("~")

    def draw_row(self, terminal: TerminalDevice, line: Line, start: int, width: int) -> None:
        for segment in line.render(start, start + width):
            if segment.style is Style.NONE:
                terminal.write(segment.text)
                continue
            terminal.set_fg_style(segment.style)
            terminal.write(segment.text)
            terminal.reset_fg_style()

    def welcome_message(self, width: int) -> str:
        message = f"Zen {self.version}"
        padding = max(width - len(message), 0) // 2
        spaces = " " * max(padding - 1, 0)
        return fit_width(f"~{spaces}{message}", width)

    def status_text(self, state: "EditorState", width: int) -> str:
        document = state.document
        modified = " (modified)" if document.is_dirty() else ""
        file_name = NO_NAME
        if document.file_name:
            file_name = document.file_name[:FILE_NAME_LIMIT]
        status = f"{file_name} - {len(document)} lines{modified}"
        indicator = (
            f"{state.mode.label} | {document.file_type} | "
            f"{state.cursor.y + 1}/{len(document)}"
        )
        gap = max(width - len(status) - len(indicator), 0)
        return pad_line(f"{status}{' ' * gap}{indicator}", width)

    def draw_status_bar(self, terminal: TerminalDevice, state: "EditorState") -> None:
        view = state.view_size
        terminal.set_cursor(0, view.height)
        terminal.clear_line()
        terminal.set_bg_style(Style.STATUS)
        terminal.set_fg_style(Style.STATUS)
        terminal.write(self.status_text(state, view.width))
        terminal.reset_fg_style()
        terminal.reset_bg_style()

    def draw_message_bar(
        self, terminal: TerminalDevice, state: "EditorState", now: float
    ) -> None:
        view = state.view_size
        terminal.set_cursor(0, view.height + 1)
        terminal.clear_line()
        message = state.status
        if message.is_visible(now, self.config.status_timeout_s):
            terminal.write(fit_width(message.text, view.width))


__all__ = ["Renderer", "STATUS_ROWS", "fit_width", "pad_line"]
