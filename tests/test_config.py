from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from textpager import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "textpager" / "config.json"
        patcher = mock.patch("textpager.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_config_yields_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_settings(), config.PagerSettings())

    def test_malformed_config_yields_defaults(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")

        self.assertEqual(config.load_settings(), config.PagerSettings())

    def test_non_object_config_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("[1, 2]", encoding="utf-8")

        self.assertEqual(config.load_config(), {})

    def test_invalid_values_fall_back_per_key(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text(
            json.dumps({"wheel_scroll_lines": True, "mouse": False}),
            encoding="utf-8",
        )

        settings = config.load_settings()

        self.assertEqual(settings.wheel_scroll_lines, 3)
        self.assertFalse(settings.mouse)

    def test_zero_wheel_step_is_rejected(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text(json.dumps({"wheel_scroll_lines": 0, "mouse": "yes"}), encoding="utf-8")

        self.assertEqual(config.load_settings(), config.PagerSettings())

    def test_valid_values_are_loaded_and_unknown_keys_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text(
            json.dumps({"other": 1, "wheel_scroll_lines": 5, "mouse": False}),
            encoding="utf-8",
        )

        self.assertEqual(config.load_settings(), config.PagerSettings(wheel_scroll_lines=5, mouse=False))


if __name__ == "__main__":
    unittest.main()
