"""Main interactive event loop for the pager.

Each iteration resyncs navigation state to the terminal size, redraws when
something changed, then decodes and applies exactly one input event.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from ..config import PagerSettings
from ..document import Document
from ..input import map_key, read_key
from ..navigation import apply_command, resync
from ..render import build_frame, frame_to_ansi
from ..state import NavigationState
from ..terminal import TerminalController

logger = logging.getLogger(__name__)

# Poll interval; terminal size is re-checked whenever no key arrives.
POLL_TIMEOUT_MS = 120


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def run_main_loop(
    state: NavigationState,
    document: Document,
    terminal: TerminalController,
    stdin_fd: int,
    settings: PagerSettings,
    get_size: Callable[[], tuple[int, int]] = _terminal_size,
) -> None:
    """Run the interactive loop until a quit command is applied.

    ``KeyboardInterrupt`` is treated like ``Ctrl-C`` and ends the loop.
    """
    dirty = True
    last_size: tuple[int, int] | None = None
    logger.debug("entering main loop for %s", document.display_name)
    while True:
        size = get_size()
        if size != last_size:
            logger.debug("terminal size %dx%d", size[0], size[1])
            last_size = size
            dirty = True
        resync(state, document, size[0], size[1])

        if dirty:
            terminal.write(frame_to_ansi(build_frame(document, state)))
            dirty = False

        try:
            key = read_key(stdin_fd, timeout_ms=POLL_TIMEOUT_MS)
        except KeyboardInterrupt:
            break
        if key == "":
            continue

        command = map_key(key, settings.wheel_scroll_lines)
        if command is None:
            continue
        if apply_command(state, document, command):
            break
        dirty = True
    logger.debug("leaving main loop")
