"""
Scrollable, re-wrappable text viewport.

Keeps the content exactly as received for copying, and a hard-wrapped
copy of the display text for rendering.
"""

import logging
from typing import Callable, List, Optional

from ..clipboard_utils import ClipboardWriter, copy_to_clipboard
from ..core.events import KeyEvent
from ..keymap import ViewportKeys
from .base import Widget
from .render import Block, fit, pad_block

logger = logging.getLogger(__name__)

FOOTER_LINES = 1


def wrap_text(content: str, width: int) -> str:
    """
    Hard-wrap every line of `content` to `width` characters.

    Long lines are cut into consecutive chunks with no regard for word
    boundaries; existing line breaks and empty lines are kept. Wrapping
    already wrapped text at the same width changes nothing.
    """
    if width <= 0:
        return content

    lines: List[str] = []
    for line in content.split("\n"):
        if len(line) <= width:
            lines.append(line)
        else:
            lines.extend(line[i:i + width] for i in range(0, len(line), width))
    return "\n".join(lines)


class ScrollViewport(Widget):
    def __init__(
        self,
        placeholder: str = "",
        keys: Optional[ViewportKeys] = None,
        clipboard: ClipboardWriter = copy_to_clipboard,
        notify: Optional[Callable[[str], None]] = None,
    ):
        super().__init__()
        self.keys = keys or ViewportKeys()
        self.clipboard = clipboard
        self.notify = notify

        self.raw_content = placeholder
        self.display_content = placeholder
        self.wrapped_content = placeholder
        self.line_offset = 0
        self._lines: List[str] = placeholder.split("\n")

    # --- Content ---

    def set_content(self, content: str, display: Optional[str] = None) -> None:
        """Replace the content and scroll to the top. `display` overrides what is shown."""
        self.raw_content = content
        self.display_content = content if display is None else display
        self.line_offset = 0
        self._rewrap()

    def _rewrap(self) -> None:
        self.wrapped_content = wrap_text(self.display_content, self.content_width)
        self._lines = self.wrapped_content.split("\n")
        self.scroll_to(self.line_offset)

    # --- Geometry ---

    @property
    def content_width(self) -> int:
        return self.width

    @property
    def visible_lines(self) -> int:
        return max(0, self.height - FOOTER_LINES)

    @property
    def total_lines(self) -> int:
        return len(self._lines)

    @property
    def max_offset(self) -> int:
        return max(0, self.total_lines - self.visible_lines)

    def set_size(self, width: int, height: int) -> None:
        super().set_size(width, height)
        # Same offset as before, clamped to the new line count
        self._rewrap()

    # --- Scrolling ---

    def scroll_to(self, offset: int) -> None:
        self.line_offset = max(0, min(offset, self.max_offset))

    def scroll_by(self, delta: int) -> None:
        self.scroll_to(self.line_offset + delta)

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        keys = self.keys
        page = max(1, self.visible_lines)
        half = max(1, page // 2)
        key = event.key

        if key in keys.copy:
            self.copy()
        elif key in keys.top:
            self.scroll_to(0)
        elif key in keys.bottom:
            self.scroll_to(self.max_offset)
        elif key in keys.line_up:
            self.scroll_by(-1)
        elif key in keys.line_down:
            self.scroll_by(1)
        elif key in keys.page_up:
            self.scroll_by(-page)
        elif key in keys.page_down:
            self.scroll_by(page)
        elif key in keys.half_page_up:
            self.scroll_by(-half)
        elif key in keys.half_page_down:
            self.scroll_by(half)
        else:
            return False
        return True

    def copy(self) -> bool:
        success, error = self.clipboard(self.raw_content)
        if not success:
            logger.warning("Copy to clipboard failed: %s", error)
            return False
        logger.debug("Copied %d characters to clipboard", len(self.raw_content))
        if self.notify is not None:
            self.notify("Copied to clipboard!")
        return True

    # --- Rendering ---

    def footer(self) -> str:
        if self.total_lines <= self.visible_lines:
            position = "all"
        else:
            last = min(self.total_lines, self.line_offset + self.visible_lines)
            position = f"{self.line_offset + 1}-{last}/{self.total_lines}"
        if not self.keys.copy:
            return position
        return f"{position} • {self.keys.copy[0]} copy"

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        shown = self._lines[self.line_offset:self.line_offset + self.visible_lines]
        block = pad_block(shown, self.width, self.visible_lines)
        return block + [fit(self.footer(), self.width)][:self.height]
