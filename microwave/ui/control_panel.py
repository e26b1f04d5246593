"""The microwave control panel.

Layout (top → bottom):
    - Remaining-time display (MM:SS)
    - Preset grid, three columns
    - Adjust row (+10m, +1m, +10s, +1s)
    - Start/Pause toggle and Cancel
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QFrame,
)

from ..timer.controller import TimerController
from ..timer.display import (
    ADJUST_STEPS,
    adjust_enabled,
    adjust_label,
    controls_enabled,
    format_time,
    toggle_icon,
    toggle_label,
)
from ..timer.presets import PRESET_CATALOG, Preset


PRESET_COLUMNS = 3

ICON_GLYPHS: dict[str, str] = {
    "popcorn": "🍿",
    "cup.and.saucer": "☕",
    "leaf": "🥦",
    "takeoutbag.and.cup.and.straw": "🥟",
    "fish": "🐟",
    "flame": "🔥",
    "play.fill": "▶",
    "pause.fill": "⏸",
    "stop.fill": "⏹",
}
FALLBACK_GLYPH = "?"

PANEL_STYLE = """
QFrame#card { background: #1E1E1E; border-radius: 16px; }
QLabel#timeDisplay {
    color: white; background: #3A3A3A; border-radius: 16px;
    font-family: monospace; font-size: 64px; font-weight: bold;
    padding: 20px 0;
}
QPushButton#presetButton { padding: 12px; border-radius: 12px; }
QPushButton#presetButton:checked { background: orange; color: white; }
QPushButton#controlButton {
    background: orange; color: white; border-radius: 12px;
    padding: 12px; min-width: 70px;
}
QPushButton#controlButton:disabled { background: #8E8E93; }
"""


def glyph_for(icon_id: str) -> str:
    return ICON_GLYPHS.get(icon_id, FALLBACK_GLYPH)


class ControlPanel(QWidget):
    """Renders a ``TimerController`` and forwards button presses to it.

    Holds no countdown state of its own; every refresh re-reads the
    controller.
    """

    def __init__(
        self, controller: TimerController, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._preset_buttons: dict[Preset, QPushButton] = {}
        self._adjust_buttons: dict[int, QPushButton] = {}
        self._build_ui()
        self._connect_signals()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.setStyleSheet(PANEL_STYLE)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(24)

        # ── time display ─────────────────────────────────────────────
        self._time_label = QLabel(format_time(0), card)
        self._time_label.setObjectName("timeDisplay")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        # ── preset grid ──────────────────────────────────────────────
        grid = QGridLayout()
        grid.setSpacing(16)
        for index, entry in enumerate(PRESET_CATALOG.values()):
            btn = QPushButton(
                f"{glyph_for(entry.icon_id)}\n{entry.display_name}", card,
            )
            btn.setObjectName("presetButton")
            btn.setCheckable(True)
            self._preset_buttons[entry.id] = btn
            row, col = divmod(index, PRESET_COLUMNS)
            grid.addWidget(btn, row, col)
        layout.addLayout(grid)

        # ── custom time increments ───────────────────────────────────
        adjust_row = QHBoxLayout()
        adjust_row.setSpacing(16)
        for step in ADJUST_STEPS:
            btn = QPushButton(adjust_label(step), card)
            btn.setObjectName("adjustButton")
            btn.setFixedSize(60, 40)
            self._adjust_buttons[step] = btn
            adjust_row.addWidget(btn)
        layout.addLayout(adjust_row)

        # ── start/pause + cancel ─────────────────────────────────────
        control_row = QHBoxLayout()
        control_row.setSpacing(24)
        control_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._toggle_btn = QPushButton(card)
        self._toggle_btn.setObjectName("controlButton")

        self._cancel_btn = QPushButton(
            f"{glyph_for('stop.fill')}\nCancel", card,
        )
        self._cancel_btn.setObjectName("controlButton")

        control_row.addWidget(self._toggle_btn)
        control_row.addWidget(self._cancel_btn)
        layout.addLayout(control_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for preset, btn in self._preset_buttons.items():
            btn.clicked.connect(
                lambda _checked=False, p=preset: self._controller.select_preset(p)
            )
        for step, btn in self._adjust_buttons.items():
            btn.clicked.connect(
                lambda _checked=False, s=step: self._controller.adjust_time(s)
            )
        self._toggle_btn.clicked.connect(self._controller.toggle_start_pause)
        self._cancel_btn.clicked.connect(self._controller.cancel)

        self._controller.changed.connect(self.refresh)

    # ── refresh ───────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Redraw everything from the controller's current state."""
        ctrl = self._controller
        self._time_label.setText(format_time(ctrl.remaining))

        for preset, btn in self._preset_buttons.items():
            btn.setChecked(ctrl.selected_preset == preset)

        can_adjust = adjust_enabled(ctrl)
        for btn in self._adjust_buttons.values():
            btn.setEnabled(can_adjust)

        enabled = controls_enabled(ctrl)
        self._toggle_btn.setText(
            f"{glyph_for(toggle_icon(ctrl))}\n{toggle_label(ctrl)}"
        )
        self._toggle_btn.setEnabled(enabled)
        self._cancel_btn.setEnabled(enabled)

    # ── accessors for the window and tests ───────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    def preset_button(self, preset: Preset) -> QPushButton:
        return self._preset_buttons[preset]

    def adjust_button(self, step: int) -> QPushButton:
        return self._adjust_buttons[step]

    @property
    def toggle_button(self) -> QPushButton:
        return self._toggle_btn

    @property
    def cancel_button(self) -> QPushButton:
        return self._cancel_btn
