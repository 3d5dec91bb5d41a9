from typing import Callable, Optional

from ..core.events import KeyEvent
from .base import Widget
from .render import Block, box, center


class SubmitButton(Widget):
    """Sends the request on enter."""

    def __init__(self, label: str = "Send", title: str = "", on_press: Optional[Callable[[], None]] = None):
        super().__init__()
        self.label = label
        self.title = title
        self.on_press = on_press

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active or event.key != "enter":
            return False
        if self.on_press is not None:
            self.on_press()
        return True

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        label = f"▶ {self.label}" if self.active else self.label
        return box([center(label, self.width - 2)], self.width, min(self.height, 3), active=self.active, title=self.title)
