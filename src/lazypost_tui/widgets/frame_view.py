from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static

from ..core.events import KeyEvent


class FrameView(Static, can_focus=True):
    """
    Shows the plain-text frame and forwards raw input to the app.

    Every key is stopped here so Textual's own bindings (tab focus cycling,
    ...) never see it; the router decides what a key means.
    """

    DEFAULT_CSS = """
    FrameView {
        width: 100%;
        height: 100%;
    }
    """

    class KeyPressed(Message):
        def __init__(self, event: KeyEvent) -> None:
            self.event = event
            super().__init__()

    class SizeChanged(Message):
        def __init__(self, width: int, height: int) -> None:
            self.width = width
            self.height = height
            super().__init__()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.post_message(self.KeyPressed(KeyEvent(event.key, event.character)))

    def on_resize(self, event: events.Resize) -> None:
        self.post_message(self.SizeChanged(event.size.width, event.size.height))

    def show_frame(self, frame: str) -> None:
        self.update(Text(frame, no_wrap=True, overflow="crop"))
