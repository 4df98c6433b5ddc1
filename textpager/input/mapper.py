"""Translate key tokens into navigation commands.

The mapper is stateless: the ``gg`` chord lives in ``NavigationState`` and
is resolved by the navigation layer, not here.
"""

from __future__ import annotations

from collections.abc import Callable

from .commands import (
    ClickAt,
    Command,
    JumpToBottom,
    MoveCursor,
    PageScroll,
    Quit,
    ScrollLines,
    ToggleChord,
)

DEFAULT_WHEEL_LINES = 3

_KEY_COMMANDS: dict[str, Command] = {
    "UP": MoveCursor(-1, 0),
    "DOWN": MoveCursor(1, 0),
    "LEFT": MoveCursor(0, -1),
    "RIGHT": MoveCursor(0, 1),
    "k": MoveCursor(-1, 0),
    "j": MoveCursor(1, 0),
    "h": MoveCursor(0, -1),
    "l": MoveCursor(0, 1),
    "CTRL_F": PageScroll(1.0),
    "CTRL_B": PageScroll(-1.0),
    "CTRL_D": PageScroll(0.5),
    "CTRL_U": PageScroll(-0.5),
    "g": ToggleChord(),
    "G": JumpToBottom(),
    "q": Quit(),
    "ESC": Quit(),
    "CTRL_C": Quit(),
}


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into 1-based integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def _wheel(direction: int) -> Callable[[str, int], Command | None]:
    def handler(_key: str, wheel_lines: int) -> Command | None:
        return ScrollLines(direction * wheel_lines)

    return handler


def _left_press(key: str, _wheel_lines: int) -> Command | None:
    col, row = parse_mouse_col_row(key)
    if col is None or row is None:
        return None
    # Terminal mouse coordinates are 1-based; screen cells are 0-based.
    return ClickAt(col - 1, row - 1)


_MOUSE_HANDLERS: dict[str, Callable[[str, int], Command | None]] = {
    "MOUSE_WHEEL_UP": _wheel(-1),
    "MOUSE_WHEEL_DOWN": _wheel(1),
    "MOUSE_LEFT_DOWN": _left_press,
}


def map_key(key: str, wheel_lines: int = DEFAULT_WHEEL_LINES) -> Command | None:
    """Return the command bound to ``key``, or ``None`` if it is unbound."""
    command = _KEY_COMMANDS.get(key)
    if command is not None:
        return command
    if key.startswith("MOUSE_"):
        handler = _MOUSE_HANDLERS.get(key.split(":", 1)[0])
        if handler is not None:
            return handler(key, wheel_lines)
    return None
