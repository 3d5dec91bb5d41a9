"""
Screen layout as a pure function of the terminal size.
"""

from dataclasses import dataclass

PADDING_PERCENT = 5
METHOD_PERCENT = 20
SUBMIT_PERCENT = 15
GAP = 1
TOP_ROW_HEIGHT = 3
SPACING = 1
FOOTER_HEIGHT = 1
TOAST_MAX_WIDTH = 60
# Below this many rows under the banner, the banner is dropped
MIN_CONTENT_HEIGHT = 20


@dataclass(frozen=True)
class LayoutPlan:
    width: int
    height: int
    padding: int
    method_width: int
    url_width: int
    submit_width: int
    tabs_width: int
    tabs_height: int
    toast_width: int
    banner_height: int

    @property
    def show_banner(self) -> bool:
        return self.banner_height > 0

    @property
    def top_row_y(self) -> int:
        return self.banner_height + SPACING if self.show_banner else 0

    @property
    def tabs_y(self) -> int:
        return self.top_row_y + TOP_ROW_HEIGHT + SPACING

    @property
    def url_x(self) -> int:
        return self.padding + self.method_width + GAP

    @property
    def submit_x(self) -> int:
        return self.url_x + self.url_width + GAP


def compute_layout(width: int, height: int, banner_height: int = 0) -> LayoutPlan:
    """Size every top-level region for a `width` x `height` terminal. Never negative."""
    width = max(0, width)
    height = max(0, height)

    padding = width * PADDING_PERCENT // 100
    available = max(0, width - 2 * padding)

    method_width = available * METHOD_PERCENT // 100
    submit_width = available * SUBMIT_PERCENT // 100
    url_width = max(0, available - method_width - submit_width - 2 * GAP)

    if banner_height <= 0 or height < banner_height + MIN_CONTENT_HEIGHT:
        banner_height = 0

    used = TOP_ROW_HEIGHT + SPACING + FOOTER_HEIGHT
    if banner_height:
        used += banner_height + SPACING
    tabs_height = max(0, height - used)

    return LayoutPlan(
        width=width,
        height=height,
        padding=padding,
        method_width=method_width,
        url_width=url_width,
        submit_width=submit_width,
        tabs_width=available,
        tabs_height=tabs_height,
        toast_width=min(available, TOAST_MAX_WIDTH),
        banner_height=banner_height,
    )
