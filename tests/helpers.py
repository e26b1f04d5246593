"""Shared test helpers for Microwave."""

from microwave.timer.controller import TimerController, TimerState


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(controller: TimerController, count: int) -> None:
    """Fire the tick slot *count* times, as the QTimer would."""
    for _ in range(count):
        controller._on_tick()


def run_until_idle(controller: TimerController, limit: int = 10_000) -> int:
    """Fire ticks until the countdown completes; return how many fired."""
    fired = 0
    while controller.state == TimerState.RUNNING and fired < limit:
        controller._on_tick()
        fired += 1
    return fired
