"""
Dropdown selector.

A two-state machine over an ordered option list:

    Closed --open-->   Open    highlighted := selected
    Open   --next-->   Open    highlighted := (highlighted + 1) mod n
    Open   --prev-->   Open    highlighted := (highlighted - 1) mod n
    Open   --select--> Closed  selected := highlighted
    Open   --close-->  Closed  highlighted := selected

Losing focus closes an open selector without committing.
"""

from enum import Enum
from typing import List, Optional, Sequence

from ..core.events import KeyEvent
from ..keymap import SelectorKeys
from .base import Widget
from .render import Block, box, fit
from .text_field import cell_markers

INDICATOR = "▼"
HIGHLIGHT = "▶ "


class SelectorState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class Selector(Widget):
    def __init__(
        self,
        options: Sequence[str],
        keys: Optional[SelectorKeys] = None,
        boxed: bool = False,
        title: str = "",
        empty_label: str = "(none)",
    ):
        super().__init__()
        if not options:
            raise ValueError("Selector needs at least one option")

        self.options: List[str] = list(options)
        self.keys = keys or SelectorKeys()
        self.boxed = boxed
        self.title = title
        self.empty_label = empty_label

        self.state = SelectorState.CLOSED
        self.selected_index = 0
        self.highlighted_index = 0

    # --- State machine ---

    @property
    def is_open(self) -> bool:
        return self.state is SelectorState.OPEN

    @property
    def value(self) -> str:
        return self.options[self.selected_index]

    def open(self) -> None:
        self.highlighted_index = self.selected_index
        self.state = SelectorState.OPEN

    def close(self) -> None:
        self.highlighted_index = self.selected_index
        self.state = SelectorState.CLOSED

    def next(self) -> None:
        self.highlighted_index = (self.highlighted_index + 1) % len(self.options)

    def prev(self) -> None:
        self.highlighted_index = (self.highlighted_index - 1 + len(self.options)) % len(self.options)

    def select(self) -> None:
        self.selected_index = self.highlighted_index
        self.state = SelectorState.CLOSED

    def select_value(self, value: str) -> bool:
        """Programmatically select the first option equal to `value`."""
        if value not in self.options:
            return False
        self.selected_index = self.options.index(value)
        self.highlighted_index = self.selected_index
        return True

    # --- Widget API ---

    def set_active(self, active: bool) -> None:
        if not active and self.is_open:
            self.close()
        super().set_active(active)

    def is_modal(self) -> bool:
        return self.active and self.is_open

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        key = event.key
        if not self.is_open:
            if key in self.keys.open:
                self.open()
                return True
            return False

        if key in self.keys.select:
            self.select()
        elif key in self.keys.close:
            self.close()
        elif key in self.keys.next:
            self.next()
        elif key in self.keys.prev:
            self.prev()
        # An open dropdown swallows everything else
        return True

    # --- Rendering ---

    def label(self, index: int) -> str:
        option = self.options[index]
        return option if option else self.empty_label

    def render_line(self, width: int) -> str:
        """Closed form on a single line: the selected option and the indicator."""
        if width <= 0:
            return ""
        if width < 4:
            return fit(INDICATOR, width)
        left, right = cell_markers(self.active)
        inner = width - 2
        return left + fit(self.label(self.selected_index), inner - 2) + " " + INDICATOR + right

    def option_lines(self, max_lines: Optional[int] = None) -> List[str]:
        """
        Every option in list order, the highlighted one marked.

        With `max_lines`, a window of consecutive options that contains the
        highlighted one is returned instead.
        """
        lines = [
            (HIGHLIGHT if i == self.highlighted_index else "  ") + self.label(i)
            for i in range(len(self.options))
        ]
        if max_lines is None or max_lines >= len(lines):
            return lines
        if max_lines <= 0:
            return []
        start = min(max(0, self.highlighted_index - max_lines + 1), len(lines) - max_lines)
        return lines[start:start + max_lines]

    def render_options(self, width: int, max_height: Optional[int] = None) -> Block:
        """The open dropdown list as a bordered block."""
        if width <= 0:
            return []
        max_lines = None if max_height is None else max_height - 2
        lines = self.option_lines(max_lines)
        if not lines:
            return []
        return box(lines, width, len(lines) + 2, active=True)

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        if not self.boxed:
            return [self.render_line(self.width)]
        text = " " + self.label(self.selected_index)
        inner = self.width - 2
        line = fit(text, max(0, inner - 2)) + " " + INDICATOR if inner >= 3 else fit(text, inner)
        return box([line], self.width, min(self.height, 3), active=self.active, title=self.title)
