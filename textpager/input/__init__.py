"""Input-layer public API for key decoding and command mapping.

Exports are split between low-level terminal decoding (`read_key`) and the
stateless key-to-command mapping used by the runtime loop.
"""

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
from .mapper import DEFAULT_WHEEL_LINES, map_key, parse_mouse_col_row
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "DEFAULT_WHEEL_LINES",
    "map_key",
    "parse_mouse_col_row",
    "Command",
    "ClickAt",
    "JumpToBottom",
    "MoveCursor",
    "PageScroll",
    "Quit",
    "ScrollLines",
    "ToggleChord",
]
