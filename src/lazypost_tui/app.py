"""
LazyPost - Textual host application.

Textual owns the terminal; the widget tree behind RootRouter owns all UI
state. This app feeds keys, resizes and timer ticks into the router and
shows the frame it renders.
"""

import logging
from typing import Callable, Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.timer import Timer

from .config import LazyPostConfig, get_config
from .core.events import RouteResult
from .core.models import HttpRequest, RequestOutcome
from .http_client import RequestIssuer
from .widgets.frame_view import FrameView
from .widgets.router import FocusTarget, RootRouter

logger = logging.getLogger(__name__)


class RequestCompleted(Message):
    """Posted from the worker thread once a request has finished"""

    def __init__(self, outcome: RequestOutcome) -> None:
        self.outcome = outcome
        super().__init__()


class LazyPostApp(App, inherit_bindings=False):
    """
    Terminal HTTP client
    """

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    TITLE = "LazyPost"

    def __init__(
        self,
        config: Optional[LazyPostConfig] = None,
        banner: str = "",
        issuer: Optional[RequestIssuer] = None,
    ):
        super().__init__()
        self.config = config or get_config()
        self.issuer = issuer or RequestIssuer(
            timeout=self.config.request_timeout,
            verify_tls=self.config.verify_tls,
        )
        self.router = RootRouter(
            dispatcher=self.dispatch_request,
            scheduler=self._schedule,
            notify=self._notify,
            banner=banner,
            pretty_json=self.config.pretty_json,
            spinner_interval=self.config.spinner_interval,
        )

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        if self.config.default_url:
            self.router.url.set_value(self.config.default_url)
        if not self.router.method.select_value(self.config.default_method):
            logger.warning("Unknown default method %r, using GET", self.config.default_method)

        self.router.focus(FocusTarget.URL)
        self.router.resize(self.size.width, self.size.height)

        frame = self.query_one("#frame", FrameView)
        frame.focus()
        self.refresh_frame()

    def refresh_frame(self) -> None:
        self.query_one("#frame", FrameView).show_frame(self.router.render_frame())

    # --- Events from the frame ---

    def on_frame_view_key_pressed(self, message: FrameView.KeyPressed) -> None:
        result = self.router.route(message.event)
        if result is RouteResult.QUIT:
            self.exit(return_code=0)
            return
        self.refresh_frame()

    def on_frame_view_size_changed(self, message: FrameView.SizeChanged) -> None:
        self.router.resize(message.width, message.height)
        self.refresh_frame()

    # --- Collaborators handed to the router ---

    def dispatch_request(self, request: HttpRequest) -> None:
        self._issue_request(request)

    @work(thread=True)
    def _issue_request(self, request: HttpRequest) -> None:
        try:
            outcome = self.issuer.issue(request)
        except Exception as e:
            # The router waits for exactly one completion, so a failed worker still reports one
            logger.exception("Request worker failed")
            outcome = RequestOutcome(error=str(e) or type(e).__name__)
        self.post_message(RequestCompleted(outcome))

    def on_request_completed(self, message: RequestCompleted) -> None:
        self.router.on_request_complete(message.outcome)
        self.refresh_frame()

    def _schedule(self, interval: float, callback: Callable[[], None]) -> Timer:
        def tick() -> None:
            callback()
            self.refresh_frame()

        return self.set_interval(interval, tick)

    def _notify(self, message: str) -> None:
        self.notify(message, title="✓ Copied", severity="information")

    def action_quit(self) -> None:
        self.exit(return_code=0)

    def on_unmount(self) -> None:
        self.issuer.close()
