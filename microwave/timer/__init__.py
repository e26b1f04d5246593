"""Timer package."""

from .controller import (
    TimerController,
    TimerState,
    MAX_SECONDS,
    TICK_INTERVAL_MS,
)
from .presets import Preset, PresetEntry, PRESET_CATALOG, preset_entry
from .display import ADJUST_STEPS, format_time

__all__ = [
    "TimerController",
    "TimerState",
    "MAX_SECONDS",
    "TICK_INTERVAL_MS",
    "Preset",
    "PresetEntry",
    "PRESET_CATALOG",
    "preset_entry",
    "ADJUST_STEPS",
    "format_time",
]
