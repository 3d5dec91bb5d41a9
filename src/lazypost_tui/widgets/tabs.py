"""
Tab sets and tabbed containers.

Panes are looked up by tab index through an IntEnum, never by label.
"""

from typing import List, Optional, Sequence

from .base import Container, Widget
from .render import Block, box, fit


class TabSet:
    """Ordered labels with exactly one active index."""

    def __init__(self, labels: Sequence[str]):
        if not labels:
            raise ValueError("TabSet needs at least one label")
        self.labels: List[str] = list(labels)
        self.active_index = 0

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.labels):
            raise IndexError(f"No tab at index {index}")
        self.active_index = index

    def next(self) -> None:
        self.active_index = (self.active_index + 1) % len(self.labels)

    def prev(self) -> None:
        self.active_index = (self.active_index - 1) % len(self.labels)

    @property
    def active_label(self) -> str:
        return self.labels[self.active_index]

    def render(self, width: int) -> str:
        parts = [
            f"[ {label} ]" if i == self.active_index else f"  {label}  "
            for i, label in enumerate(self.labels)
        ]
        return fit(" ".join(parts), width)


class TabbedPane(Container):
    """
    A container that shows one pane per tab.

    `panes` is indexed by the same IntEnum as the tab labels.
    """

    def __init__(self, labels: Sequence[str], panes: Sequence[Widget]):
        super().__init__()
        if len(labels) != len(panes):
            raise ValueError("Every tab needs exactly one pane")
        self.tabs = TabSet(labels)
        self.panes: List[Widget] = list(panes)

    def children(self) -> List[Widget]:
        return list(self.panes)

    def selected_child(self) -> Optional[Widget]:
        return self.panes[self.tabs.active_index]

    @property
    def active_index(self) -> int:
        return self.tabs.active_index

    @property
    def current_pane(self) -> Widget:
        return self.panes[self.tabs.active_index]

    def switch_to(self, index: int) -> None:
        """Blur the current pane, select `index`, and activate its pane."""
        self.current_pane.set_active(False)
        self.tabs.select(index)
        self.refocus()

    def cycle_tab(self, forward: bool) -> bool:
        # The nearest tab set to the active leaf wins
        if super().cycle_tab(forward):
            return True
        if not self.active:
            return False
        self.current_pane.set_active(False)
        if forward:
            self.tabs.next()
        else:
            self.tabs.prev()
        self.refocus()
        return True

    def set_size(self, width: int, height: int) -> None:
        super().set_size(width, height)
        # Tab bar above a bordered pane
        for pane in self.panes:
            pane.set_size(self.width - 2, self.height - 3)

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        body = box(self.current_pane.render(), self.width, self.height - 1, active=self.active)
        return [self.tabs.render(self.width)] + body
