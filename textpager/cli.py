"""Command-line front door for textpager.

Parses CLI options, loads the target file, and dispatches into the
interactive pager runtime. Startup errors exit with a diagnostic.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .config import load_settings
from .document import Document, load_document
from .errors import PagerError, UsageError
from .render import build_frame, frame_to_text
from .runtime import run_pager
from .state import NavigationState

USAGE = "usage: textpager <filename>"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def render_view(document: Document, columns: int, rows: int) -> str:
    """Render the initial screen for ``document`` as plain text rows."""
    state = NavigationState(screen_width=columns, screen_height=rows)
    return frame_to_text(build_frame(document, state))


def _configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; the terminal itself is never logged to."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textpager",
        description="View a text file in a bordered terminal pager.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to the file to view.")
    parser.add_argument("--nopager", action="store_true", help="Print the file directly without paging.")
    parser.add_argument("--render", action="store_true", help="Print the initial screen and exit.")
    parser.add_argument("--cols", type=_positive_int, default=None, help="Screen width for --render.")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Screen height for --render.")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def run(argv: list[str] | None = None) -> None:
    """Parse ``argv`` and run the pager, raising ``PagerError`` on startup failure."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_file)

    if args.path is None:
        raise UsageError(USAGE)
    document = load_document(Path(args.path))

    if args.render:
        term = shutil.get_terminal_size((80, 24))
        columns = args.cols if args.cols is not None else term.columns
        rows = args.rows if args.rows is not None else term.lines
        sys.stdout.write(render_view(document, columns, rows))
        return

    run_pager(document, load_settings(), nopager=args.nopager)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: report startup errors on stderr with a non-zero status."""
    try:
        run(argv)
    except PagerError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(exc.exit_status) from exc


if __name__ == "__main__":
    main()
