"""
Key bindings used by the router and the widgets.

Alt combinations are not reported by every terminal, so each global
hotkey also has a function-key alternative.
"""

from dataclasses import dataclass, field
from typing import Tuple

Keys = Tuple[str, ...]


@dataclass(frozen=True)
class SelectorKeys:
    open: Keys = ("enter", "space")
    close: Keys = ("escape",)
    next: Keys = ("down", "j")
    prev: Keys = ("up", "k")
    select: Keys = ("enter",)


@dataclass(frozen=True)
class ViewportKeys:
    top: Keys = ("home", "g")
    bottom: Keys = ("end", "G")
    line_up: Keys = ("up", "k")
    line_down: Keys = ("down", "j")
    page_up: Keys = ("pageup",)
    page_down: Keys = ("pagedown",)
    half_page_up: Keys = ("ctrl+u",)
    half_page_down: Keys = ("ctrl+d",)
    copy: Keys = ("y",)


@dataclass(frozen=True)
class KeyMap:
    # Global
    quit: Keys = ("ctrl+c", "ctrl+q")
    escape: Keys = ("escape",)
    focus_method: Keys = ("alt+1", "f1")
    focus_url: Keys = ("alt+2", "f2")
    focus_query: Keys = ("alt+3", "f3")
    focus_result: Keys = ("alt+4", "f4")
    submit: Keys = ("alt+5", "f5")
    focus_submit: Keys = ("alt+s",)
    copy_curl: Keys = ("ctrl+y",)

    # Tab sets
    next_tab: Keys = ("tab",)
    prev_tab: Keys = ("shift+tab",)

    # Notifications
    dismiss: Keys = ("enter",)

    selector: SelectorKeys = field(default_factory=SelectorKeys)
    viewport: ViewportKeys = field(default_factory=ViewportKeys)


DEFAULT_KEYMAP = KeyMap()


def help_line() -> str:
    """Footer text describing the global hotkeys."""
    return (
        "alt+1/f1 method • alt+2/f2 url • alt+3/f3 query • alt+4/f4 result • "
        "alt+5/f5 send • tab next pane • ctrl+y copy as cURL • ctrl+c quit"
    )
