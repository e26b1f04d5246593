"""Countdown state machine for the microwave control panel.

States
------
IDLE      Not counting — a duration may be loaded (``remaining > 0``)
          or the clock may be empty.
RUNNING   Counting down, one tick per second.
PAUSED    Countdown frozen with ``remaining`` preserved.

Transitions
-----------
IDLE → RUNNING        (start_or_resume, needs remaining > 0)
RUNNING → PAUSED      (pause)
PAUSED → RUNNING      (start_or_resume)
RUNNING → IDLE        (tick fires with remaining == 0)
Any → IDLE            (select_preset / cancel)

Tick ownership
--------------
A single ``QTimer`` owned by the controller is the only tick source.
It is stopped on every transition out of RUNNING and restarted (never
duplicated) on every transition into it, so at most one one-second
registration is ever live.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .presets import Preset, preset_entry


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

MAX_SECONDS = 60 * 60  # custom durations clamp to one hour
TICK_INTERVAL_MS = 1000


# ── controller ────────────────────────────────────────────────────────────


class TimerController(QObject):
    """Owns the countdown state and the tick that drives it.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement of the countdown.
    state_changed(new_state: TimerState)
        Emitted on every transition, and when a reset lands on IDLE.
    changed()
        Emitted after any observable field changes.  Renderers re-read
        the whole controller on this signal.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    changed = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        max_seconds: int = MAX_SECONDS,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        # Settings may lower the ceiling, never raise it past one hour.
        self._max_seconds: int = min(max(0, max_seconds), MAX_SECONDS)

        # ── countdown state ───────────────────────────────────────────
        self._state: TimerState = TimerState.IDLE
        self._selected_preset: Preset | None = None
        self._custom_seconds: int = 0
        self._remaining: int = 0

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(tick_interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def selected_preset(self) -> Preset | None:
        """The active catalog entry, or None for a custom duration."""
        return self._selected_preset

    @property
    def custom_seconds(self) -> int:
        """Baseline that manual adjustments are applied to."""
        return self._custom_seconds

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def max_seconds(self) -> int:
        return self._max_seconds

    @property
    def is_running(self) -> bool:
        """True while a countdown is active, including when paused."""
        return self._state != TimerState.IDLE

    @property
    def is_paused(self) -> bool:
        return self._state == TimerState.PAUSED

    @property
    def tick_active(self) -> bool:
        """True while the one-second tick is scheduled."""
        return self._qt_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_preset(self, preset: Preset) -> None:
        """Load a preset duration and return to IDLE.  Valid from any state."""
        seconds = preset_entry(preset).seconds
        self._qt_timer.stop()
        self._selected_preset = preset
        self._custom_seconds = seconds
        self._remaining = seconds
        logger.debug("preset %s selected (%ds)", preset.value, seconds)
        self._set_state(TimerState.IDLE)

    def adjust_time(self, delta_seconds: int) -> None:
        """Shift the custom duration by *delta_seconds*, clamped to
        ``[0, max_seconds]``.

        Clears any preset selection.  The adjustment is applied in every
        state; the control panel only offers it while IDLE.
        """
        if self.is_running:
            logger.debug(
                "adjusting time by %+d while %s", delta_seconds, self._state.value,
            )
        self._selected_preset = None
        self._custom_seconds = max(
            0, min(self._custom_seconds + delta_seconds, self._max_seconds),
        )
        self._remaining = self._custom_seconds
        self.changed.emit()

    def start_or_resume(self) -> None:
        """IDLE → RUNNING or PAUSED → RUNNING.

        Ignored when IDLE with nothing on the clock, or already RUNNING.
        """
        if self._state == TimerState.RUNNING:
            return
        if self._state == TimerState.IDLE and self._remaining == 0:
            logger.debug("start ignored: no time on the clock")
            return
        # start() on an active QTimer restarts it; there is never a second
        # registration.
        self._qt_timer.start()
        self._set_state(TimerState.RUNNING)

    def pause(self) -> None:
        """Freeze the countdown.  Only meaningful while RUNNING."""
        if self._state != TimerState.RUNNING:
            return
        self._qt_timer.stop()
        self._set_state(TimerState.PAUSED)

    def toggle_start_pause(self) -> None:
        """The single start/pause button: pause when RUNNING, else start."""
        if self._state == TimerState.RUNNING:
            self.pause()
        else:
            self.start_or_resume()

    def cancel(self) -> None:
        """Stop everything and return to the initial empty state."""
        self._qt_timer.stop()
        self._selected_preset = None
        self._custom_seconds = 0
        self._remaining = 0
        self._set_state(TimerState.IDLE)

    def shutdown(self) -> None:
        """Release the pending tick.  Call before discarding the controller."""
        self._qt_timer.stop()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1
            self.tick.emit(self._remaining)
            self.changed.emit()
            return

        # Fired with nothing left: the countdown is complete.
        self._qt_timer.stop()
        logger.debug("countdown complete")
        self._set_state(TimerState.IDLE)

    def _set_state(self, new_state: TimerState) -> None:
        if new_state != self._state:
            logger.debug("%s → %s", self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state)
        self.changed.emit()
