"""Pager bootstrap: choose plain output or the interactive session."""

from __future__ import annotations

import logging
import os
import sys

from ..config import PagerSettings
from ..document import Document, read_source_bytes
from ..state import NavigationState
from ..terminal import TerminalController
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def write_unpaged(document: Document) -> None:
    """Copy the source file to stdout byte for byte.

    Documents without a backing file are written as UTF-8 text.
    """
    if document.path is not None:
        data = read_source_bytes(document.path)
    else:
        data = document.text.encode("utf-8")
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def run_pager(document: Document, settings: PagerSettings, nopager: bool = False) -> None:
    """Page ``document`` interactively, or print it when not on a terminal."""
    if nopager or not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        logger.debug("writing %s without paging", document.display_name)
        write_unpaged(document)
        return

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno(), mouse=settings.mouse)
    state = NavigationState()
    with terminal.raw_mode():
        run_main_loop(state, document, terminal, stdin_fd, settings)
