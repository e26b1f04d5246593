"""Values the control panel derives from controller state.

Kept free of Qt widgets so the rules for labels and enablement can be
checked without building a window.
"""

from __future__ import annotations

from .controller import TimerController, TimerState


ADJUST_STEPS: tuple[int, ...] = (600, 60, 10, 1)

_ADJUST_LABELS: dict[int, str] = {
    600: "+10m",
    60: "+1m",
    10: "+10s",
    1: "+1s",
}


def format_time(seconds: int) -> str:
    """``125`` → ``"02:05"``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def adjust_label(step: int) -> str:
    return _ADJUST_LABELS.get(step, "")


def toggle_label(controller: TimerController) -> str:
    return "Pause" if controller.state == TimerState.RUNNING else "Start"


def toggle_icon(controller: TimerController) -> str:
    return "pause.fill" if controller.state == TimerState.RUNNING else "play.fill"


def controls_enabled(controller: TimerController) -> bool:
    """Start/pause and cancel are disabled only when there is nothing
    loaded and nothing running."""
    return controller.is_running or controller.remaining > 0


def adjust_enabled(controller: TimerController) -> bool:
    return not controller.is_running
