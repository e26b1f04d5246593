"""Static catalog of cooking presets.

Each preset is a named shortcut to a fixed countdown duration.  The
catalog is a compiled-in constant table; the order of ``PRESET_CATALOG``
is the order the control panel lays out its preset grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Preset(Enum):
    POPCORN = "popcorn"
    BEVERAGE = "beverage"
    VEGETABLE = "vegetable"
    DUMPLINGS = "dumplings"
    FISH = "fish"
    STIR_FRY = "stir_fry"


@dataclass(frozen=True)
class PresetEntry:
    id: Preset
    display_name: str
    seconds: int
    icon_id: str


# ── catalog ───────────────────────────────────────────────────────────────

PRESET_CATALOG: dict[Preset, PresetEntry] = {
    entry.id: entry
    for entry in (
        PresetEntry(Preset.POPCORN, "Popcorn", 120, "popcorn"),
        PresetEntry(Preset.BEVERAGE, "Beverage", 60, "cup.and.saucer"),
        PresetEntry(Preset.VEGETABLE, "Vegetable", 180, "leaf"),
        PresetEntry(
            Preset.DUMPLINGS, "Dumplings", 150, "takeoutbag.and.cup.and.straw",
        ),
        PresetEntry(Preset.FISH, "Fish", 200, "fish"),
        PresetEntry(Preset.STIR_FRY, "Stir Fry", 180, "flame"),
    )
}


def preset_entry(preset: Preset) -> PresetEntry:
    """Look up the catalog entry for *preset*."""
    return PRESET_CATALOG[preset]
