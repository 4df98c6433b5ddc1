"""Terminal control helpers for the pager session.

Owns raw-mode lifecycle, alternate-screen switching, mouse toggles, and the
single write path used for rendered frames.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

MOUSE_ON = b"\x1b[?1000h\x1b[?1006h"
MOUSE_OFF = b"\x1b[?1000l\x1b[?1006l"


class TerminalController:
    """Manage terminal mode transitions for one pager session."""

    def __init__(self, stdin_fd: int, stdout_fd: int, mouse: bool = True) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.mouse = mouse
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._mouse_reporting_enabled = False

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode, with mouse reporting if configured."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor until the first frame places it.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self.set_mouse_reporting(self.mouse)

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and cursor shape."""
        self.set_mouse_reporting(False)
        # Reset cursor shape, show cursor, and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[0 q\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_mouse_reporting(self, enabled: bool) -> None:
        """Toggle SGR mouse tracking without changing other terminal state."""
        desired = bool(enabled)
        if desired == self._mouse_reporting_enabled:
            return
        os.write(self.stdout_fd, MOUSE_ON if desired else MOUSE_OFF)
        self._mouse_reporting_enabled = desired

    def write(self, text: str) -> None:
        """Write one composed frame to the terminal."""
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
