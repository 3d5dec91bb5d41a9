from typing import Callable, Optional

from ..core.events import KeyEvent
from .base import Widget
from .render import Block, box, fit

CURSOR = "▏"
MASK = "•"


def cell_markers(active: bool):
    """Brackets around single-line cells; focused cells get arrows."""
    return ("»", "«") if active else ("[", "]")


class TextField(Widget):
    """Single-line editable buffer with a cursor."""

    def __init__(
        self,
        placeholder: str = "",
        char_limit: int = 0,
        masked: bool = False,
        bordered: bool = False,
        title: str = "",
        on_submit: Optional[Callable[[], None]] = None,
    ):
        super().__init__()
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.masked = masked
        self.bordered = bordered
        self.title = title
        self.on_submit = on_submit

        self.value = ""
        self.cursor = 0
        # When set, the next edit replaces the whole value
        self.all_selected = False

    def set_value(self, value: str) -> None:
        if self.char_limit:
            value = value[:self.char_limit]
        self.value = value
        self.cursor = len(value)
        self.all_selected = False

    def select_all(self) -> None:
        self.cursor = len(self.value)
        self.all_selected = bool(self.value)

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        key = event.key
        if key == "enter":
            if self.on_submit is None:
                return False
            self.on_submit()
            return True

        if event.is_printable:
            self._insert(event.character)
            return True

        if key == "backspace":
            if self._clear_selection():
                return True
            if self.cursor > 0:
                self.value = self.value[:self.cursor - 1] + self.value[self.cursor:]
                self.cursor -= 1
            return True
        if key == "delete":
            if self._clear_selection():
                return True
            self.value = self.value[:self.cursor] + self.value[self.cursor + 1:]
            return True

        moves = {
            "left": self.cursor - 1,
            "right": self.cursor + 1,
            "home": 0,
            "ctrl+a": 0,
            "end": len(self.value),
            "ctrl+e": len(self.value),
        }
        if key in moves:
            self.all_selected = False
            self.cursor = max(0, min(len(self.value), moves[key]))
            return True

        return False

    def _insert(self, text: str) -> None:
        self._clear_selection()
        if self.char_limit and len(self.value) >= self.char_limit:
            return
        self.value = self.value[:self.cursor] + text + self.value[self.cursor:]
        self.cursor += len(text)

    def _clear_selection(self) -> bool:
        if not self.all_selected:
            return False
        self.value = ""
        self.cursor = 0
        self.all_selected = False
        return True

    def visible_text(self, width: int) -> str:
        """The part of the value that fits in `width` cells, cursor included."""
        if width <= 0:
            return ""

        if not self.value and not self.active:
            return fit(self.placeholder, width)

        shown = MASK * len(self.value) if self.masked else self.value
        if not self.active:
            return fit(shown, width)

        if self.all_selected:
            return fit(f"[{shown}]", width)

        with_cursor = shown[:self.cursor] + CURSOR + shown[self.cursor:]
        start = max(0, self.cursor + 1 - width)
        return fit(with_cursor[start:], width)

    def render_line(self, width: int) -> str:
        if width <= 0:
            return ""
        if width < 3:
            return fit(self.visible_text(width), width)
        left, right = cell_markers(self.active)
        return left + self.visible_text(width - 2) + right

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        if not self.bordered:
            return [self.render_line(self.width)]
        return box(
            [" " + self.visible_text(self.width - 4)],
            self.width,
            min(self.height, 3),
            active=self.active,
            title=self.title,
        )
