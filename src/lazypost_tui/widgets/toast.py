from typing import Callable, Optional

from .render import Block, box, center


class Toast:
    """A single transient message, dismissed explicitly."""

    HINT = "(enter to dismiss)"

    def __init__(self):
        self.message: Optional[str] = None
        self._on_dismiss: Optional[Callable[[], None]] = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def show(self, message: str, on_dismiss: Optional[Callable[[], None]] = None) -> None:
        """Replace any visible message. `on_dismiss` runs once when it is dismissed."""
        self.message = message
        self._on_dismiss = on_dismiss

    def dismiss(self) -> None:
        callback = self._on_dismiss
        self.message = None
        self._on_dismiss = None
        if callback is not None:
            callback()

    def render(self, width: int) -> Block:
        if not self.visible or width < 4:
            return []
        inner = width - 2
        return box(["", center(self.message, inner), center(self.HINT, inner)], width, 5, active=True, title="Notice")
