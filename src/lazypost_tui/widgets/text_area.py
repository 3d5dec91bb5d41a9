from typing import List

from ..core.events import KeyEvent
from .base import Widget
from .render import Block, fit, pad_block
from .text_field import CURSOR


class TextArea(Widget):
    """Multi-line editor used for the request body."""

    def __init__(self, placeholder: str = ""):
        super().__init__()
        self.placeholder = placeholder
        self.lines: List[str] = [""]
        self.row = 0
        self.col = 0
        self.scroll = 0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def set_text(self, text: str) -> None:
        self.lines = text.split("\n")
        self.row = len(self.lines) - 1
        self.col = len(self.lines[self.row])
        self._follow_cursor()

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        key = event.key
        line = self.lines[self.row]

        if event.is_printable:
            self.lines[self.row] = line[:self.col] + event.character + line[self.col:]
            self.col += 1
        elif key == "enter":
            self.lines[self.row] = line[:self.col]
            self.lines.insert(self.row + 1, line[self.col:])
            self.row += 1
            self.col = 0
        elif key == "backspace":
            if self.col > 0:
                self.lines[self.row] = line[:self.col - 1] + line[self.col:]
                self.col -= 1
            elif self.row > 0:
                previous = self.lines[self.row - 1]
                self.lines[self.row - 1] = previous + line
                del self.lines[self.row]
                self.row -= 1
                self.col = len(previous)
        elif key == "delete":
            if self.col < len(line):
                self.lines[self.row] = line[:self.col] + line[self.col + 1:]
            elif self.row < len(self.lines) - 1:
                self.lines[self.row] = line + self.lines.pop(self.row + 1)
        elif key == "left":
            if self.col > 0:
                self.col -= 1
            elif self.row > 0:
                self.row -= 1
                self.col = len(self.lines[self.row])
        elif key == "right":
            if self.col < len(line):
                self.col += 1
            elif self.row < len(self.lines) - 1:
                self.row += 1
                self.col = 0
        elif key == "up":
            if self.row > 0:
                self.row -= 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif key == "down":
            if self.row < len(self.lines) - 1:
                self.row += 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif key == "home":
            self.col = 0
        elif key == "end":
            self.col = len(line)
        else:
            return False

        self._follow_cursor()
        return True

    def set_size(self, width: int, height: int) -> None:
        super().set_size(width, height)
        self._follow_cursor()

    def _follow_cursor(self) -> None:
        visible = max(1, self.height)
        if self.row < self.scroll:
            self.scroll = self.row
        elif self.row >= self.scroll + visible:
            self.scroll = self.row - visible + 1

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        if self.text == "" and not self.active:
            return pad_block([self.placeholder], self.width, self.height)

        shown = []
        for index in range(self.scroll, min(len(self.lines), self.scroll + self.height)):
            line = self.lines[index]
            if self.active and index == self.row:
                line = line[:self.col] + CURSOR + line[self.col:]
                start = max(0, self.col + 1 - self.width)
                line = line[start:]
            shown.append(fit(line, self.width))
        return pad_block(shown, self.width, self.height)
