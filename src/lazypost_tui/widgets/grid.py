"""
Paginated row grid.

R fixed composite rows shown through a window of `visible_count` rows,
navigated with a (row, column) focus cursor in reading order.
"""

from typing import Callable, Dict, List, Optional, Tuple

from ..core.events import KeyEvent
from .base import Container, Widget
from .render import Block, fit, overlay, pad_block
from .rows import CompositeRow, make_header_row, make_param_row

CHROME_LINES = 2  # heading + separator
IDEAL_CONTENT_WIDTH = 35
BORDER_ALLOWANCE = 2
IDEAL_OUTER_WIDTH = IDEAL_CONTENT_WIDTH + BORDER_ALLOWANCE
TOTAL_IDEAL_WIDTH = 2 * IDEAL_OUTER_WIDTH
COLUMN_SPACING = 1
# Border plus one option
MIN_DROPDOWN_HEIGHT = 3

PARAM_ROWS = 6
HEADER_ROWS = 9


def visible_row_count(available_height: int, row_count: int) -> int:
    """Rows that fit under the chrome, keeping a line for the scroll indicator when needed."""
    count = available_height - CHROME_LINES
    if row_count > count and count > 0:
        count -= 1
    return max(0, min(count, row_count))


def column_widths(available_width: int) -> Tuple[int, int]:
    """
    Outer widths of the two columns.

    Both get the ideal width when there is room; otherwise the space is
    split so the two widths add up to exactly the available width.
    """
    available = max(0, available_width - COLUMN_SPACING)
    if available >= TOTAL_IDEAL_WIDTH:
        return IDEAL_OUTER_WIDTH, IDEAL_OUTER_WIDTH
    first = available // 2
    return first, available - first


class RowGrid(Container):
    def __init__(self, row_count: int, row_factory: Callable[[], CompositeRow], headings: Tuple[str, str]):
        super().__init__()
        if row_count <= 0:
            raise ValueError("RowGrid needs at least one row")
        self.rows: List[CompositeRow] = [row_factory() for _ in range(row_count)]
        self.headings = headings

        self.focused_row = 0
        self.focused_col = 0
        self.offset = 0
        self.visible_count = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def children(self) -> List[Widget]:
        return list(self.rows)

    def selected_child(self) -> Optional[Widget]:
        return self.rows[self.focused_row]

    def set_active(self, active: bool) -> None:
        self.rows[self.focused_row].column = self.focused_col
        super().set_active(active)

    # --- Navigation ---

    def move_to(self, row: int, col: int) -> None:
        self.focused_row = max(0, min(self.row_count - 1, row))
        self.focused_col = 0 if col <= 0 else 1
        self.ensure_focused_visible()
        self.refocus()

    def move_up(self) -> None:
        self.move_to(self.focused_row - 1, self.focused_col)

    def move_down(self) -> None:
        self.move_to(self.focused_row + 1, self.focused_col)

    def move_left(self) -> None:
        if self.focused_col == 1:
            self.move_to(self.focused_row, 0)
        elif self.focused_row > 0:
            self.move_to(self.focused_row - 1, 1)

    def move_right(self) -> None:
        if self.focused_col == 0:
            self.move_to(self.focused_row, 1)
        elif self.focused_row < self.row_count - 1:
            self.move_to(self.focused_row + 1, 0)

    def ensure_focused_visible(self) -> None:
        if self.visible_count <= 0:
            self.offset = 0
            return
        if self.focused_row < self.offset:
            self.offset = self.focused_row
        elif self.focused_row >= self.offset + self.visible_count:
            self.offset = self.focused_row - self.visible_count + 1
        self.offset = max(0, min(self.offset, max(0, self.row_count - self.visible_count)))

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        row = self.rows[self.focused_row]
        if row.is_modal():
            return row.handle_key(event)

        moves = {
            "up": self.move_up,
            "down": self.move_down,
            "left": self.move_left,
            "right": self.move_right,
        }
        if event.key in moves:
            moves[event.key]()
            return True

        return row.handle_key(event)

    # --- Layout ---

    def set_size(self, width: int, height: int) -> None:
        super().set_size(width, height)
        self.visible_count = visible_row_count(self.height, self.row_count)
        first, second = column_widths(self.width)
        for row in self.rows:
            row.set_columns(first, second)
        self.ensure_focused_visible()

    # --- Data ---

    def get_values(self) -> Dict[str, str]:
        raise NotImplementedError

    # --- Rendering ---

    def scroll_indicator(self) -> str:
        up = "↑ " if self.offset > 0 else "  "
        down = "↓" if self.offset + self.visible_count < self.row_count else " "
        first = self.offset + 1
        last = self.offset + self.visible_count
        return f"{up}{down} rows {first}-{last} of {self.row_count}"

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []

        first, second = column_widths(self.width)
        lines = [
            fit(self.headings[0], first) + " " + fit(self.headings[1], second),
            "─" * self.width,
        ]
        for index in range(self.offset, self.offset + self.visible_count):
            lines.append(self.rows[index].render_line())
        if self.visible_count > 0 and self.row_count > self.visible_count:
            lines.append(self.scroll_indicator())

        block = pad_block(lines, self.width, self.height)

        # An open header dropdown is drawn over the neighbouring rows
        focused = self.rows[self.focused_row]
        primary = focused.primary
        if focused.is_modal() and hasattr(primary, "render_options"):
            row_y = CHROME_LINES + (self.focused_row - self.offset)
            below = self.height - row_y - 1
            # Near the bottom edge the list opens upwards
            if below >= MIN_DROPDOWN_HEIGHT or below >= row_y:
                dropdown = primary.render_options(max(first, 20), below)
                y = row_y + 1
            else:
                dropdown = primary.render_options(max(first, 20), row_y)
                y = row_y - len(dropdown)
            block = overlay(block, dropdown, 0, y)
        return block


class ParamsGrid(RowGrid):
    """Query parameters: name and value fields."""

    def __init__(self):
        super().__init__(PARAM_ROWS, make_param_row, ("Name", "Value"))

    def get_values(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for row in self.rows:
            name = row.primary.value.strip()
            if name:
                values[name] = row.value.value.strip()
        return values


class HeadersGrid(RowGrid):
    """Request headers: a header-name dropdown and a value field."""

    def __init__(self, keys=None):
        super().__init__(HEADER_ROWS, lambda: make_header_row(keys), ("Header", "Value"))

    def get_values(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for row in self.rows:
            name = row.primary.value
            if name.strip():
                values[name] = row.value.value
        return values
