"""Pure projection of navigation state onto a character grid.

``build_frame`` never mutates its inputs and never fails: degenerate screen
sizes just produce fewer visible rows. ``frame_to_ansi`` serializes a frame
into one terminal write.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document
from .state import NavigationState

BORDER_TOP_LEFT = "┌"
BORDER_TOP_RIGHT = "┐"
BORDER_BOTTOM_LEFT = "└"
BORDER_BOTTOM_RIGHT = "┘"
BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"

# DECSCUSR: blinking block cursor.
BLINKING_CURSOR_SGR = "\033[1 q"


@dataclass(frozen=True)
class Frame:
    """Rendered screen: one string per row plus an optional cursor cell."""

    rows: tuple[str, ...]
    cursor: tuple[int, int] | None
    status_row: int | None = None


def _cell_text(text: str) -> str:
    """Draw control characters as spaces so each code point fills one cell."""
    if text.isprintable():
        return text
    return "".join(ch if ch.isprintable() else " " for ch in text)


def _put(grid: list[list[str]], x: int, y: int, text: str) -> None:
    if not 0 <= y < len(grid):
        return
    row = grid[y]
    for offset, ch in enumerate(text):
        col = x + offset
        if col >= len(row):
            break
        if col >= 0:
            row[col] = ch


def _draw_border(grid: list[list[str]], width: int, height: int) -> None:
    """Draw a box over rows ``0..height-2``; the last row is left for status."""
    bottom = height - 2
    if width < 1 or bottom < 0:
        return
    inner = BORDER_HORIZONTAL * max(0, width - 2)
    _put(grid, 0, 0, BORDER_TOP_LEFT + inner + BORDER_TOP_RIGHT)
    if bottom > 0:
        _put(grid, 0, bottom, BORDER_BOTTOM_LEFT + inner + BORDER_BOTTOM_RIGHT)
    for y in range(1, bottom):
        _put(grid, 0, y, BORDER_VERTICAL)
        _put(grid, width - 1, y, BORDER_VERTICAL)


def visible_slice(line: str, start_col: int, width: int) -> str:
    """Return ``line[start_col:start_col + width]`` clipped to the line."""
    if width <= 0 or start_col >= len(line):
        return ""
    return line[start_col:start_col + width]


def status_text(document: Document, state: NavigationState) -> str:
    return (
        f" {document.display_name} | Line: {state.current_line + 1}/{len(document)}"
        f" | Col: {state.current_col + 1} "
    )


def cursor_cell(state: NavigationState) -> tuple[int, int] | None:
    """Return the cursor's screen cell, or ``None`` when it is off-viewport."""
    rel_x = state.current_col - state.start_col
    rel_y = state.current_line - state.start_line
    if 0 <= rel_y < state.content_height and 0 <= rel_x < state.content_width:
        return rel_x + 1, rel_y + 1
    return None


def build_frame(document: Document, state: NavigationState) -> Frame:
    """Project ``document`` through the viewport described by ``state``."""
    width = max(0, state.screen_width)
    height = max(0, state.screen_height)
    grid = [[" "] * width for _ in range(height)]
    _draw_border(grid, width, height)

    text_width = state.content_width
    for row in range(max(0, state.content_height)):
        line_idx = state.start_line + row
        if line_idx >= len(document):
            break
        text = visible_slice(document[line_idx], state.start_col, text_width)
        _put(grid, 1, 1 + row, _cell_text(text))

    status_row = height - 1 if height > 0 else None
    if status_row is not None:
        _put(grid, 1, status_row, _cell_text(status_text(document, state))[: max(0, width - 2)])

    return Frame(
        rows=tuple("".join(row) for row in grid),
        cursor=cursor_cell(state),
        status_row=status_row,
    )


def frame_to_ansi(frame: Frame) -> str:
    """Serialize ``frame`` as a full-screen redraw ending with cursor placement."""
    out: list[str] = ["\033[H"]
    for y, row in enumerate(frame.rows):
        if y:
            out.append("\r\n")
        if y == frame.status_row:
            out.append("\033[7m")
            out.append(row)
            out.append("\033[0m")
        else:
            out.append(row)
    if frame.cursor is None:
        out.append("\033[?25l")
    else:
        x, y = frame.cursor
        out.append(f"\033[{y + 1};{x + 1}H")
        out.append(BLINKING_CURSOR_SGR)
        out.append("\033[?25h")
    return "".join(out)


def frame_to_text(frame: Frame) -> str:
    """Return the frame as plain newline-terminated rows."""
    return "".join(row + "\n" for row in frame.rows)
