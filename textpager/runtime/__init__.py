"""Public runtime orchestration entry points.

This package groups the interactive pager bootstrap (`run_pager`) and the
event loop used by tests and composition code.
"""

from __future__ import annotations


def run_pager(*args, **kwargs):
    """Lazily import pager entrypoint to avoid terminal imports on package import."""
    from .app import run_pager as _run_pager

    return _run_pager(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_pager",
    "run_main_loop",
]
