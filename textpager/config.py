"""JSON config loading.

Reads mouse-wheel step and mouse-reporting preference. All access is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .input.mapper import DEFAULT_WHEEL_LINES

logger = logging.getLogger(__name__)

APP_NAME = "textpager"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class PagerSettings:
    """User preferences applied for one pager session."""

    wheel_scroll_lines: int = DEFAULT_WHEEL_LINES
    mouse: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def _coerce_positive_int(value: object, default: int) -> int:
    """Booleans and non-positive or non-integer values fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def load_settings() -> PagerSettings:
    """Build ``PagerSettings`` from config, validating each key independently."""
    data = load_config()
    mouse = data.get("mouse")
    return PagerSettings(
        wheel_scroll_lines=_coerce_positive_int(data.get("wheel_scroll_lines"), DEFAULT_WHEEL_LINES),
        mouse=mouse if isinstance(mouse, bool) else True,
    )

