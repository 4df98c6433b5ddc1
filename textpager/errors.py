"""Startup error types.

These are the only failures the pager surfaces. Once the navigation engine
is running, out-of-range requests are clamped or ignored instead.
"""

from __future__ import annotations

from pathlib import Path


class PagerError(Exception):
    """Base class for fatal startup errors."""

    exit_status = 1


class UsageError(PagerError):
    """Raised when the command line does not name a file to view."""

    exit_status = 2


class FileReadError(PagerError):
    """Raised when the target file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
