"""
Busy indicator shown while a request is outstanding.

The animation timer is a capability: the indicator asks its scheduler for
a ticker when shown and stops it when hidden, so nothing keeps firing
once the request completes.
"""

from typing import Callable, Optional, Protocol

FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
DEFAULT_MESSAGE = "Sending request..."


class Ticker(Protocol):
    def stop(self) -> None: ...


# (interval_seconds, callback) -> running ticker
Scheduler = Callable[[float, Callable[[], None]], Ticker]


class BusyIndicator:
    def __init__(self, scheduler: Optional[Scheduler] = None, interval: float = 0.08):
        self.scheduler = scheduler
        self.interval = interval
        self.visible = False
        self.message = DEFAULT_MESSAGE
        self.frame = 0
        self._ticker: Optional[Ticker] = None

    @property
    def ticking(self) -> bool:
        return self._ticker is not None

    def show(self, message: str = DEFAULT_MESSAGE) -> None:
        self.message = message
        if self.visible:
            return
        self.visible = True
        self.frame = 0
        if self.scheduler is not None:
            self._ticker = self.scheduler(self.interval, self.tick)

    def hide(self) -> None:
        self.visible = False
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def tick(self) -> None:
        if self.visible:
            self.frame = (self.frame + 1) % len(FRAMES)

    def render(self) -> str:
        if not self.visible:
            return ""
        return f"{FRAMES[self.frame]} {self.message}"
