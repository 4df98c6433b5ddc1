from __future__ import annotations

from dataclasses import dataclass

# Top border, bottom border and status line.
RESERVED_ROWS = 3


@dataclass
class NavigationState:
    start_line: int = 0
    start_col: int = 0
    current_line: int = 0
    current_col: int = 0
    screen_width: int = 80
    screen_height: int = 24
    pending_chord: bool = False

    @property
    def content_height(self) -> int:
        return self.screen_height - RESERVED_ROWS

    @property
    def content_width(self) -> int:
        return self.screen_width - 2
