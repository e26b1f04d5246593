"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Microwave/settings.json

Only preferences live here; the countdown itself is never saved.

Usage::

    settings = load_settings()
    settings.always_on_top = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import get_type_hints

from .timer.controller import MAX_SECONDS


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Microwave"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    max_seconds: int = MAX_SECONDS         # may only lower the one-hour ceiling

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 420
    window_height: int = 560


_FIELD_TYPES = get_type_hints(Settings)


def _valid_value(name: str, value) -> bool:
    expected = _FIELD_TYPES[name]
    # JSON true/false would otherwise pass as ints
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys and values of the wrong type are dropped, so the field
    keeps its default.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        filtered = {}
        for key, value in data.items():
            if key not in _FIELD_TYPES:
                continue
            if not _valid_value(key, value):
                logger.warning("ignoring invalid setting %s=%r", key, value)
                continue
            filtered[key] = value
        return Settings(**filtered)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
