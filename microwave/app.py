"""Main application window."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow

from .settings import Settings, load_settings, save_settings
from .timer.controller import TimerController
from .timer.display import controls_enabled
from .timer.presets import PRESET_CATALOG
from .ui.control_panel import ControlPanel


logger = logging.getLogger(__name__)

_PRESET_KEYS: dict[int, int] = {
    Qt.Key.Key_1.value: 0,
    Qt.Key.Key_2.value: 1,
    Qt.Key.Key_3.value: 2,
    Qt.Key.Key_4.value: 3,
    Qt.Key.Key_5.value: 4,
    Qt.Key.Key_6.value: 5,
}


class MicrowaveApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()

        # ── geometry save timer (before anything can resize the window) ──
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        self.setWindowTitle("Microwave")
        self.setMinimumSize(360, 480)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── controller + panel ────────────────────────────────────────
        self._controller = TimerController(
            self,
            max_seconds=self._settings.max_seconds,
        )
        self._panel = ControlPanel(self._controller, self)
        self.setCentralWidget(self._panel)

        self._build_menu_bar()
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

    @property
    def controller(self) -> TimerController:
        return self._controller

    @property
    def panel(self) -> ControlPanel:
        return self._panel

    # ══════════════════════════════════════════════════════════════════
    #  MENU
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        window_menu = menu_bar.addMenu("Window")
        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        window_menu.addAction(self._aot_action)

        close_action = QAction("Close Window", self)
        close_action.setShortcut(QKeySequence("Ctrl+W"))
        close_action.triggered.connect(self.close)
        window_menu.addAction(close_action)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE (geometry, always-on-top)
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves — restart 500ms timer on each move/resize."""
        self._geometry_save_timer.start()

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        save_settings(self._settings)
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        visible = self.isVisible()
        self.setWindowFlags(flags)
        if visible:
            self.show()  # setWindowFlags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the countdown."""
        self._controller.toggle_start_pause()

    def _on_escape(self) -> None:
        """Cancel the countdown (no-op when the clock is empty)."""
        if controls_enabled(self._controller):
            self._controller.cancel()

    def _on_preset_key(self, index: int) -> None:
        entries = list(PRESET_CATALOG.values())
        if 0 <= index < len(entries):
            self._controller.select_preset(entries[index].id)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._controller.shutdown()
        logger.debug("window closed")
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space toggles, Escape cancels, 1-6 pick a preset."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        if key in _PRESET_KEYS and not event.modifiers():
            self._on_preset_key(_PRESET_KEYS[key])
            event.accept()
            return
        super().keyPressEvent(event)
