"""
LazyPost Widgets Module

A terminal-independent widget tree (focus routing, dropdowns, row grids,
viewports, tabs) plus the Textual widget that displays its frames.
"""

from .base import Widget, Container
from .text_field import TextField
from .text_area import TextArea
from .selector import Selector, SelectorState
from .rows import CompositeRow, HEADER_OPTIONS, make_param_row, make_header_row
from .grid import RowGrid, ParamsGrid, HeadersGrid, visible_row_count, column_widths
from .viewport import ScrollViewport, wrap_text
from .tabs import TabSet, TabbedPane
from .auth import AuthContainer, AuthType, BasicAuthDetails, TokenAuthDetails, APIKeyAuthDetails
from .tabs_container import TabsContainer, QueryTab, ResultTab, OuterTab, QueryPane, ResultPane
from .button import SubmitButton
from .toast import Toast
from .busy_indicator import BusyIndicator, FRAMES
from .router import RootRouter, FocusTarget, METHOD_OPTIONS
from .frame_view import FrameView

__all__ = [
    # Base
    "Widget",
    "Container",
    # Leaves
    "TextField",
    "TextArea",
    "Selector",
    "SelectorState",
    "SubmitButton",
    # Rows and grids
    "CompositeRow",
    "HEADER_OPTIONS",
    "make_param_row",
    "make_header_row",
    "RowGrid",
    "ParamsGrid",
    "HeadersGrid",
    "visible_row_count",
    "column_widths",
    # Viewport
    "ScrollViewport",
    "wrap_text",
    # Tabs
    "TabSet",
    "TabbedPane",
    "TabsContainer",
    "QueryTab",
    "ResultTab",
    "OuterTab",
    "QueryPane",
    "ResultPane",
    # Auth
    "AuthContainer",
    "AuthType",
    "BasicAuthDetails",
    "TokenAuthDetails",
    "APIKeyAuthDetails",
    # Overlays
    "Toast",
    "BusyIndicator",
    "FRAMES",
    # Router
    "RootRouter",
    "FocusTarget",
    "METHOD_OPTIONS",
    # Textual
    "FrameView",
]
