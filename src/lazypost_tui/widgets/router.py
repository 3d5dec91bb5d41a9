"""
Root focus router.

Owns the top-level widgets (method, URL, submit button, tab container),
decides which of them is active, and routes every key event:

    1. quit
    2. direct-focus hotkeys (and submit / copy-as-cURL)
    3. tab cycling, claimed by the nearest active tab set
    4. everything else, delegated down the active path
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from ..clipboard_utils import ClipboardWriter, copy_to_clipboard
from ..core.events import KeyEvent, RouteResult
from ..core.models import HttpRequest, RequestOutcome
from ..core.request_builder import build_request
from ..core.validators import is_valid_json, is_valid_url
from ..handlers import format_body_for_display, format_response_headers, to_curl
from ..keymap import DEFAULT_KEYMAP, KeyMap, help_line
from ..layout import LayoutPlan, compute_layout
from .base import Container, Widget
from .busy_indicator import BusyIndicator, Scheduler
from .button import SubmitButton
from .render import Block, center, fit, join_horizontal, overlay, pad_block
from .selector import Selector
from .tabs_container import OuterTab, QueryPane, ResultPane, TabsContainer
from .text_field import TextField
from .toast import Toast

logger = logging.getLogger(__name__)

METHOD_OPTIONS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]
URL_CHAR_LIMIT = 256

INVALID_URL_MESSAGE = "Invalid URL: The provided URL is not valid."
INVALID_JSON_MESSAGE = "Invalid JSON: The request body is not valid JSON."
BUSY_MESSAGE = "A request is already in progress."
SENDING_MESSAGE = "Sending request..."

Dispatcher = Callable[[HttpRequest], None]


class FocusTarget(IntEnum):
    METHOD = 0
    URL = 1
    SUBMIT = 2
    TABS = 3


class RootRouter(Container):
    def __init__(
        self,
        dispatcher: Dispatcher,
        keymap: KeyMap = DEFAULT_KEYMAP,
        clipboard: ClipboardWriter = copy_to_clipboard,
        scheduler: Optional[Scheduler] = None,
        notify: Optional[Callable[[str], None]] = None,
        banner: str = "",
        pretty_json: bool = True,
        spinner_interval: float = 0.08,
    ):
        super().__init__()
        self.dispatcher = dispatcher
        self.keymap = keymap
        self.clipboard = clipboard
        self.notify = notify
        self.pretty_json = pretty_json
        self.banner_lines: List[str] = banner.rstrip("\n").split("\n") if banner.strip() else []

        self.method = Selector(METHOD_OPTIONS, keys=keymap.selector, boxed=True, title="(Alt+1) Method")
        self.url = TextField(
            placeholder="https://api.example.com/resource",
            char_limit=URL_CHAR_LIMIT,
            bordered=True,
            title="(Alt+2) URL",
            on_submit=self.submit,
        )
        self.submit_button = SubmitButton("Send", title="(Alt+5)", on_press=self.submit)
        self.tabs = TabsContainer(keymap, clipboard, notify)
        self.toast = Toast()
        self.busy = BusyIndicator(scheduler, spinner_interval)

        self.targets: Dict[FocusTarget, Widget] = {
            FocusTarget.METHOD: self.method,
            FocusTarget.URL: self.url,
            FocusTarget.SUBMIT: self.submit_button,
            FocusTarget.TABS: self.tabs,
        }
        self.focus_target = FocusTarget.URL
        self.in_flight = False
        self.plan: LayoutPlan = compute_layout(0, 0)

    # --- Focus ---

    def children(self) -> List[Widget]:
        return list(self.targets.values())

    def selected_child(self) -> Optional[Widget]:
        return self.targets[self.focus_target]

    def focus(self, target: FocusTarget) -> None:
        self.focus_target = target
        self.set_active(True)

    def focus_query(self, pane: Optional[QueryPane] = None) -> None:
        self.tabs.switch_outer(OuterTab.QUERY)
        if pane is not None:
            self.tabs.query.switch_to(pane)
        self.focus(FocusTarget.TABS)

    def focus_result(self, pane: Optional[ResultPane] = None) -> None:
        self.tabs.switch_outer(OuterTab.RESULT)
        if pane is not None:
            self.tabs.result.switch_to(pane)
        self.focus(FocusTarget.TABS)

    # --- Routing ---

    def route(self, event: KeyEvent) -> RouteResult:
        km = self.keymap
        key = event.key

        # 1. Quit
        if key in km.quit:
            return RouteResult.QUIT
        if key in km.escape:
            if self.is_modal():
                self.handle_key(event)
                return RouteResult.CONSUMED
            return RouteResult.QUIT

        if self.toast.visible and key in km.dismiss:
            self.dismiss_toast()
            return RouteResult.CONSUMED

        # 2. Direct focus hotkeys
        hotkeys = [
            (km.focus_method, lambda: self.focus(FocusTarget.METHOD)),
            (km.focus_url, lambda: self.focus(FocusTarget.URL)),
            (km.focus_submit, lambda: self.focus(FocusTarget.SUBMIT)),
            (km.focus_query, self.focus_query),
            (km.focus_result, self.focus_result),
            (km.submit, self.submit),
            (km.copy_curl, self.copy_as_curl),
        ]
        for keys, action in hotkeys:
            if key in keys:
                action()
                return RouteResult.CONSUMED

        # 3. Tab cycling
        if key in km.next_tab or key in km.prev_tab:
            claimed = self.cycle_tab(forward=key in km.next_tab)
            return RouteResult.CONSUMED if claimed else RouteResult.IGNORED

        # 4. Active leaf
        return RouteResult.CONSUMED if self.handle_key(event) else RouteResult.IGNORED

    def dismiss_toast(self) -> None:
        self.toast.dismiss()

    def _return_to_url(self) -> None:
        self.focus(FocusTarget.URL)
        self.url.select_all()

    # --- Requests ---

    def compose_request(self) -> HttpRequest:
        query = self.tabs.query
        return build_request(
            method=self.method.value,
            url=self.url.value.strip(),
            params=query.params_values(),
            headers=query.header_values(),
            auth_headers=query.auth_headers(),
            body=query.body_text,
        )

    def submit(self) -> None:
        if self.in_flight:
            logger.warning("Submit ignored: a request is already in progress")
            self.toast.show(BUSY_MESSAGE)
            return

        url = self.url.value.strip()
        if not is_valid_url(url):
            logger.info("Rejected invalid URL %r", url)
            self.toast.show(INVALID_URL_MESSAGE, on_dismiss=self._return_to_url)
            self.focus(FocusTarget.URL)
            return

        if not is_valid_json(self.tabs.query.body_text):
            logger.info("Rejected request body that is not valid JSON")
            self.toast.show(INVALID_JSON_MESSAGE)
            self.focus_query(QueryPane.BODY)
            return

        request = self.compose_request()
        self.in_flight = True
        self.busy.show(SENDING_MESSAGE)
        logger.debug("Dispatching %s %s", request.method, request.url)
        self.dispatcher(request)

    def on_request_complete(self, outcome: RequestOutcome) -> None:
        """Apply the single completion event of a dispatched request."""
        self.in_flight = False
        self.busy.hide()

        if not outcome.succeeded:
            self.toast.show(f"Error: {outcome.error}", on_dismiss=self._return_to_url)
            self.focus(FocusTarget.URL)
            return

        self.tabs.result.show_response(
            format_response_headers(outcome),
            outcome.body,
            format_body_for_display(outcome.body, self.pretty_json),
        )
        self.focus_result(ResultPane.HEADERS)

    def copy_as_curl(self) -> None:
        success, error = self.clipboard(to_curl(self.compose_request()))
        if not success:
            logger.warning("Copy as cURL failed: %s", error)
            return
        if self.notify is not None:
            self.notify("cURL copied to clipboard!")

    # --- Layout ---

    def resize(self, width: int, height: int) -> None:
        """Apply a terminal size to every widget. Safe to repeat."""
        plan = compute_layout(width, height, len(self.banner_lines))
        self.plan = plan
        self.set_size(plan.width, plan.height)
        self.method.set_size(plan.method_width, 3)
        self.url.set_size(plan.url_width, 3)
        self.submit_button.set_size(plan.submit_width, 3)
        self.tabs.set_size(plan.tabs_width, plan.tabs_height)

    # --- Rendering ---

    def render(self) -> Block:
        plan = self.plan
        if plan.width <= 0 or plan.height <= 0:
            return []

        indent = " " * plan.padding
        lines: List[str] = []

        if plan.show_banner:
            lines.extend(center(line, plan.width) for line in self.banner_lines)
            lines.append("")

        top_row = join_horizontal([self.method.render(), self.url.render(), self.submit_button.render()])
        lines.extend(indent + line for line in top_row)
        lines.extend([""] * (plan.tabs_y - len(lines)))

        lines.extend(indent + line for line in self.tabs.render())
        lines.extend([""] * (plan.height - 1 - len(lines)))
        lines.append(help_line())

        frame = pad_block(lines, plan.width, plan.height)

        if self.busy.visible and plan.url_width > 4:
            frame = overlay(frame, [fit(self.busy.render(), plan.url_width - 4)], plan.url_x + 2, plan.top_row_y + 1)

        if self.method.is_open:
            frame = overlay(frame, self.method.render_options(max(plan.method_width, 14)), plan.padding, plan.top_row_y + 3)

        toast = self.toast.render(plan.toast_width)
        if toast:
            x = max(0, (plan.width - plan.toast_width) // 2)
            y = max(0, (plan.height - len(toast)) // 2)
            frame = overlay(frame, toast, x, y)

        return frame

    def render_frame(self) -> str:
        return "\n".join(self.render())
