"""CLI argument handling and startup error tests.

Verifies exit statuses for usage and read errors, and how ``textpager.cli``
hands the loaded document to the runtime.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from textpager import cli
from textpager.config import PagerSettings


class CliTests(unittest.TestCase):
    def test_missing_path_is_usage_error(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr, mock.patch(
            "textpager.cli.run_pager"
        ) as run_pager:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("usage: textpager <filename>", stderr.getvalue())
        run_pager.assert_not_called()

    def test_unreadable_file_exits_nonzero_with_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope.txt"
            with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main([str(missing)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn(str(missing), stderr.getvalue())

    def test_main_passes_document_and_settings_to_runtime(self) -> None:
        settings = PagerSettings(wheel_scroll_lines=4)
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "target.txt"
            target.write_text("hello\nworld\n", encoding="utf-8")
            with mock.patch("textpager.cli.run_pager") as run_pager, mock.patch(
                "textpager.cli.load_settings", return_value=settings
            ):
                cli.main([str(target)])

        run_pager.assert_called_once()
        document, passed_settings = run_pager.call_args.args
        self.assertEqual(document.lines, ("hello", "world", ""))
        self.assertEqual(document.path, target)
        self.assertIs(passed_settings, settings)
        self.assertFalse(run_pager.call_args.kwargs["nopager"])

    def test_nopager_flag_is_forwarded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "target.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch("textpager.cli.run_pager") as run_pager, mock.patch(
                "textpager.cli.load_settings", return_value=PagerSettings()
            ):
                cli.main(["--nopager", str(target)])

        self.assertTrue(run_pager.call_args.kwargs["nopager"])

    def test_render_prints_first_screen_and_skips_runtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "render.txt"
            target.write_text("abc\ndef\n", encoding="utf-8")
            with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout, mock.patch(
                "textpager.cli.run_pager"
            ) as run_pager:
                cli.main(["--render", "--cols", "12", "--rows", "5", str(target)])

        run_pager.assert_not_called()
        rows = stdout.getvalue().split("\n")
        self.assertEqual(rows[0], "┌──────────┐")
        self.assertEqual(rows[1], "│abc       │")
        self.assertEqual(rows[2], "│def       │")
        self.assertEqual(rows[3], "└──────────┘")
        self.assertTrue(rows[4].startswith("  /"))
        self.assertEqual(len(rows[4]), 12)

    def test_render_view_uses_requested_size(self) -> None:
        from textpager.document import Document

        rendered = cli.render_view(Document(("abc",)), 6, 4)

        self.assertEqual(rendered.split("\n")[:2], ["┌────┐", "│abc │"])


if __name__ == "__main__":
    unittest.main()
