"""Navigation command values produced by the key mapper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveCursor:
    d_line: int = 0
    d_col: int = 0


@dataclass(frozen=True)
class ScrollLines:
    delta: int


@dataclass(frozen=True)
class PageScroll:
    """Scroll by ``fraction`` content heights (``1.0`` page, ``0.5`` half)."""

    fraction: float


@dataclass(frozen=True)
class JumpToBottom:
    pass


@dataclass(frozen=True)
class ToggleChord:
    """First or second press of the ``gg`` jump-to-top gesture."""


@dataclass(frozen=True)
class ClickAt:
    """Primary-button press at a 0-based screen cell."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    pass


Command = MoveCursor | ScrollLines | PageScroll | JumpToBottom | ToggleChord | ClickAt | Quit
