"""
Composite rows: two leaves navigated as one unit.
"""

from typing import List, Optional, Tuple, Union

from ..keymap import SelectorKeys
from .base import Container, Widget
from .selector import Selector
from .text_field import TextField

FIELD_CHAR_LIMIT = 35
HEADER_VALUE_LIMIT = 256

Leaf = Union[TextField, Selector]

# Request header names offered per row; the first entry is the empty choice
HEADER_OPTIONS = [
    "",
    "Accept",
    "Accept-Charset",
    "Accept-Encoding",
    "Accept-Language",
    "Accept-Datetime",
    "Authorization",
    "Cache-Control",
    "Content-Type",
    "Cookie",
    "Expect",
    "From",
    "Host",
    "If-Match",
    "If-Modified-Since",
    "If-None-Match",
    "If-Range",
    "If-Unmodified-Since",
    "Max-Forwards",
    "Origin",
    "Proxy-Authorization",
    "Range",
    "Referer",
    "TE",
    "User-Agent",
    "X-Requested-With",
    "X-Forwarded-For",
    "X-Forwarded-Host",
    "X-Forwarded-Proto",
    "X-HTTP-Method-Override",
    "X-Csrf-Token",
    "X-XSS-Protection",
    "X-Content-Type-Options",
    "X-Real-IP",
    "X-Powered-By",
    "DNT",
    "X-Api-Key",
    "X-Auth-Token",
]


class CompositeRow(Container):
    """A primary leaf (column 0) and a value field (column 1)."""

    def __init__(self, primary: Leaf, value: TextField):
        super().__init__()
        self.primary = primary
        self.value = value
        self.column = 0
        self.column_widths: Tuple[int, int] = (0, 0)

    def children(self) -> List[Widget]:
        return [self.primary, self.value]

    def selected_child(self) -> Optional[Widget]:
        return self.children()[self.column]

    def focus_column(self, column: int) -> None:
        self.column = 0 if column <= 0 else 1
        self.refocus()

    def set_columns(self, first: int, second: int) -> None:
        self.column_widths = (max(0, first), max(0, second))
        self.primary.set_size(self.column_widths[0], 1)
        self.value.set_size(self.column_widths[1], 1)
        self.set_size(sum(self.column_widths) + 1, 1)

    def render_line(self) -> str:
        first, second = self.column_widths
        return self.primary.render_line(first) + " " + self.value.render_line(second)

    def render(self):
        if self.width <= 0:
            return []
        return [self.render_line()]


def make_param_row() -> CompositeRow:
    return CompositeRow(
        TextField(placeholder="Name", char_limit=FIELD_CHAR_LIMIT),
        TextField(placeholder="Value", char_limit=FIELD_CHAR_LIMIT),
    )


def make_header_row(keys: Optional[SelectorKeys] = None) -> CompositeRow:
    return CompositeRow(
        Selector(HEADER_OPTIONS, keys=keys),
        TextField(placeholder="Value", char_limit=HEADER_VALUE_LIMIT),
    )
