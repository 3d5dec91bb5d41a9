"""
The two-level tab container.

Outer tabs: Query (request composition) and Result (response).
Each owns its own inner tab set; switching the outer tab keeps the
inner selection of both.
"""

from enum import IntEnum
from typing import Callable, Dict, Optional

from ..clipboard_utils import ClipboardWriter, copy_to_clipboard
from ..keymap import KeyMap, DEFAULT_KEYMAP
from .auth import AuthContainer
from .grid import HeadersGrid, ParamsGrid
from .render import Block, fit
from .tabs import TabbedPane
from .text_area import TextArea
from .viewport import ScrollViewport

HEADERS_PLACEHOLDER = "Response headers will be displayed here."
BODY_PLACEHOLDER = "Response body will be displayed here."


class QueryPane(IntEnum):
    PARAMS = 0
    AUTH = 1
    HEADERS = 2
    BODY = 3


class ResultPane(IntEnum):
    HEADERS = 0
    BODY = 1


class OuterTab(IntEnum):
    QUERY = 0
    RESULT = 1


class QueryTab(TabbedPane):
    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP):
        self.params = ParamsGrid()
        self.auth = AuthContainer(keys=keymap.selector)
        self.headers = HeadersGrid(keys=keymap.selector)
        self.body = TextArea(placeholder='{"key": "value"}')
        super().__init__(
            ["Params", "Auth", "Headers", "Body"],
            [self.params, self.auth, self.headers, self.body],
        )

    def params_values(self) -> Dict[str, str]:
        return self.params.get_values()

    def header_values(self) -> Dict[str, str]:
        return self.headers.get_values()

    def auth_headers(self) -> Dict[str, str]:
        return self.auth.auth_headers()

    @property
    def body_text(self) -> str:
        return self.body.text


class ResultTab(TabbedPane):
    def __init__(
        self,
        keymap: KeyMap = DEFAULT_KEYMAP,
        clipboard: ClipboardWriter = copy_to_clipboard,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.headers_view = ScrollViewport(HEADERS_PLACEHOLDER, keymap.viewport, clipboard, notify)
        self.body_view = ScrollViewport(BODY_PLACEHOLDER, keymap.viewport, clipboard, notify)
        super().__init__(["Headers", "Body"], [self.headers_view, self.body_view])

    def show_response(self, headers_text: str, body: str, body_display: Optional[str] = None) -> None:
        self.headers_view.set_content(headers_text)
        self.body_view.set_content(body, body_display)


class TabsContainer(TabbedPane):
    LABELS = ["(Alt+3) Query", "(Alt+4) Result"]

    def __init__(
        self,
        keymap: KeyMap = DEFAULT_KEYMAP,
        clipboard: ClipboardWriter = copy_to_clipboard,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.query = QueryTab(keymap)
        self.result = ResultTab(keymap, clipboard, notify)
        super().__init__(self.LABELS, [self.query, self.result])

    def switch_outer(self, tab: OuterTab) -> None:
        """The inner tab selected under `tab` is re-activated, not reset."""
        self.switch_to(tab)

    def set_size(self, width: int, height: int) -> None:
        super(TabbedPane, self).set_size(width, height)
        # Outer tab bar only; each inner pane draws its own border
        for pane in self.panes:
            pane.set_size(self.width, self.height - 1)

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        bar = fit(self.tabs.render(self.width), self.width)
        return [bar] + self.current_pane.render()[:self.height - 1]
