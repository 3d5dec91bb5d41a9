"""
Widget tree base classes.

Every node owns its children exclusively and mutates them only through
their methods. A container keeps a selection pointer (tab index, focus
cursor, ...) and derives its single active child from it in `set_active`.
"""

from typing import List, Optional

from ..core.events import KeyEvent
from .render import Block


class Widget:
    """A node in the widget tree. Leaves subclass this directly."""

    def __init__(self) -> None:
        self.active = False
        self.width = 0
        self.height = 0

    def set_active(self, active: bool) -> None:
        self.active = active

    def set_size(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)

    def handle_key(self, event: KeyEvent) -> bool:
        """Return True when the key was consumed."""
        return False

    def is_modal(self) -> bool:
        """True while this widget claims every key, e.g. an open dropdown."""
        return False

    def cycle_tab(self, forward: bool) -> bool:
        """Offer a tab-cycle key. Only widgets owning a tab set claim it."""
        return False

    def active_leaves(self) -> List["Widget"]:
        return [self] if self.active else []

    def render(self) -> Block:
        return []


class Container(Widget):
    """A widget with focusable children."""

    def children(self) -> List[Widget]:
        raise NotImplementedError

    def selected_child(self) -> Optional[Widget]:
        """The child the selection pointer designates, if any."""
        return None

    def set_active(self, active: bool) -> None:
        # Deactivate every child first, then re-derive the one active child
        self.active = active
        for child in self.children():
            child.set_active(False)
        if active:
            selected = self.selected_child()
            if selected is not None:
                selected.set_active(True)

    def refocus(self) -> None:
        """Re-apply the activation cascade after the selection pointer moved."""
        if self.active:
            self.set_active(True)

    def active_child(self) -> Optional[Widget]:
        if not self.active:
            return None
        selected = self.selected_child()
        if selected is not None and selected.active:
            return selected
        return None

    def handle_key(self, event: KeyEvent) -> bool:
        child = self.active_child()
        if child is None:
            return False
        return child.handle_key(event)

    def is_modal(self) -> bool:
        child = self.active_child()
        return child is not None and child.is_modal()

    def cycle_tab(self, forward: bool) -> bool:
        child = self.active_child()
        return child is not None and child.cycle_tab(forward)

    def active_leaves(self) -> List[Widget]:
        leaves: List[Widget] = []
        for child in self.children():
            leaves.extend(child.active_leaves())
        return leaves
