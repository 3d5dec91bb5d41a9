"""Small fakes and input helpers shared by the tests."""

from typing import Callable, List, Tuple

from lazypost_tui.core.events import KeyEvent


def key(name: str) -> KeyEvent:
    if len(name) == 1:
        return KeyEvent.from_char(name)
    if name == "space":
        return KeyEvent("space", " ")
    return KeyEvent(name)


def press(target, *names: str):
    """Send keys to a router (via route) or to a single widget (via handle_key)."""
    results = []
    for name in names:
        event = key(name)
        if hasattr(target, "route"):
            results.append(target.route(event))
        else:
            results.append(target.handle_key(event))
    return results


def type_text(target, text: str) -> None:
    press(target, *list(text))


class FakeTicker:
    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def fire(self) -> None:
        if not self.stopped:
            self.callback()

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    def __init__(self) -> None:
        self.tickers: List[FakeTicker] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> FakeTicker:
        ticker = FakeTicker(interval, callback)
        self.tickers.append(ticker)
        return ticker


class FakeClipboard:
    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.copied: List[str] = []

    def __call__(self, text: str) -> Tuple[bool, str]:
        if not self.succeed:
            return False, "no clipboard"
        self.copied.append(text)
        return True, ""
