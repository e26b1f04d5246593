"""UI package."""

from .control_panel import ControlPanel

__all__ = [
    "ControlPanel",
]
