"""Viewport and cursor navigation over a ``Document``.

Every operation mutates the owned ``NavigationState`` in place and keeps it
inside the document. Nothing here raises for out-of-range requests: moves
that would leave the document are ignored and scroll targets are clamped.
This module intentionally has no terminal or rendering concerns.
"""

from __future__ import annotations

from .document import Document
from .input.commands import (
    ClickAt,
    Command,
    JumpToBottom,
    MoveCursor,
    PageScroll,
    Quit,
    ScrollLines,
    ToggleChord,
)
from .state import NavigationState


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def max_start_line(state: NavigationState, document: Document) -> int:
    """Return the largest ``start_line`` that still fills the content area."""
    return max(0, len(document) - state.content_height)


def resync(state: NavigationState, document: Document, screen_width: int, screen_height: int) -> None:
    """Store screen size and restore the cursor-tracking invariants.

    Runs once per render cycle, not only on resize: it scrolls the viewport
    by the minimum amount needed to show the cursor row, then pulls the
    cursor column back onto the current line.
    """
    state.screen_width = screen_width
    state.screen_height = screen_height
    content_height = state.content_height

    state.current_line = _clamp(state.current_line, 0, len(document) - 1)
    if content_height > 0:
        if state.current_line < state.start_line:
            state.start_line = state.current_line
        elif state.current_line >= state.start_line + content_height:
            state.start_line = state.current_line - content_height + 1
    state.start_line = _clamp(state.start_line, 0, max_start_line(state, document))
    state.start_col = max(0, state.start_col)

    state.current_col = _clamp(state.current_col, 0, document.line_length(state.current_line))


def move_cursor(state: NavigationState, document: Document, d_line: int, d_col: int) -> None:
    """Move the cursor by ``(d_line, d_col)``; each axis is ignored if out of range.

    The column bound is taken from the line reached by the vertical part of
    the same move.
    """
    if d_line != 0:
        new_line = state.current_line + d_line
        if 0 <= new_line < len(document):
            state.current_line = new_line

    if d_col != 0:
        new_col = state.current_col + d_col
        if 0 <= new_col <= document.line_length(state.current_line):
            state.current_col = new_col


def scroll_lines(state: NavigationState, document: Document, delta: int) -> None:
    """Scroll the viewport by ``delta`` lines without moving the cursor."""
    state.start_line = _clamp(state.start_line + delta, 0, max_start_line(state, document))


def page_scroll(state: NavigationState, document: Document, fraction: float) -> None:
    """Scroll by ``fraction`` content heights; partial pages truncate toward zero."""
    delta = int(fraction * max(0, state.content_height))
    scroll_lines(state, document, delta)


def jump_to_top(state: NavigationState) -> None:
    state.current_line = 0
    state.pending_chord = False


def jump_to_bottom(state: NavigationState, document: Document) -> None:
    state.current_line = len(document) - 1
    state.pending_chord = False


def click_at(state: NavigationState, document: Document, screen_x: int, screen_y: int) -> None:
    """Move the cursor to the document cell under screen cell ``(x, y)``.

    Row 0 and column 0 of the screen are border, so content starts at
    ``(1, 1)``. Clicks outside the content rows or below the last line are
    ignored; a column left of the text keeps the current column.
    """
    row = screen_y - 1
    if not 0 <= row < state.content_height:
        return
    line = state.start_line + row
    if line >= len(document):
        return
    state.current_line = line
    col = min(state.start_col + (screen_x - 1), document.line_length(line))
    if col >= 0:
        state.current_col = col


def toggle_chord_or_jump_top(state: NavigationState) -> None:
    """Handle one ``g`` press: arm the chord, or jump to top if already armed.

    Unrelated commands between the two presses leave the chord armed.
    """
    if state.pending_chord:
        jump_to_top(state)
    else:
        state.pending_chord = True


def apply_command(state: NavigationState, document: Document, command: Command) -> bool:
    """Apply one mapped command and return ``True`` when the pager should quit."""
    if isinstance(command, Quit):
        return True
    if isinstance(command, MoveCursor):
        move_cursor(state, document, command.d_line, command.d_col)
    elif isinstance(command, ScrollLines):
        scroll_lines(state, document, command.delta)
    elif isinstance(command, PageScroll):
        page_scroll(state, document, command.fraction)
    elif isinstance(command, ToggleChord):
        toggle_chord_or_jump_top(state)
    elif isinstance(command, JumpToBottom):
        jump_to_bottom(state, document)
    elif isinstance(command, ClickAt):
        click_at(state, document, command.x, command.y)
    return False
