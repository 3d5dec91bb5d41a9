"""
LazyPost Core - Events

Input events flowing through the widget tree and the result of routing them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class KeyEvent:
    """
    A single key press, independent of the terminal host.

    `key` uses the host's key names ("enter", "escape", "shift+tab", "ctrl+u", "a").
    `character` is the printable character for the press, if any.
    """
    key: str
    character: Optional[str] = None

    @classmethod
    def from_char(cls, char: str) -> "KeyEvent":
        """Build the event produced by typing a single character."""
        if char == " ":
            return cls("space", " ")
        return cls(char, char)

    @property
    def is_printable(self) -> bool:
        return (
            self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
        )


class RouteResult(str, Enum):
    """What the root router did with an event"""
    IGNORED = "ignored"
    CONSUMED = "consumed"
    QUIT = "quit"
