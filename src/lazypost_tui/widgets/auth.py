"""
Auth pane: an auth-type dropdown plus the detail fields for the chosen type.
"""

from enum import Enum, IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.events import KeyEvent
from ..core.request_builder import basic_auth_header, bearer_auth_header
from ..keymap import SelectorKeys
from .base import Container, Widget
from .render import Block, fit, pad_block
from .selector import Selector
from .text_field import TextField

TOKEN_CHAR_LIMIT = 2048


class AuthType(IntEnum):
    NONE = 0
    BASIC = 1
    BEARER = 2
    JWT = 3
    OAUTH2 = 4
    API_KEY = 5


AUTH_TYPE_LABELS = ["None", "Basic", "Bearer", "JWT", "OAuth2", "API Key"]


class FieldStack(Container):
    """Labelled text fields stacked vertically; up/down move between them."""

    def __init__(self, fields: Sequence[Tuple[str, TextField]]):
        super().__init__()
        self.fields = list(fields)
        self.index = 0

    def children(self) -> List[Widget]:
        return [field for _, field in self.fields]

    def selected_child(self) -> Optional[Widget]:
        return self.fields[self.index][1]

    @property
    def at_first_field(self) -> bool:
        return self.index == 0

    def focus_field(self, index: int) -> None:
        self.index = max(0, min(len(self.fields) - 1, index))
        self.refocus()

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False
        if event.key == "up" and self.index > 0:
            self.focus_field(self.index - 1)
            return True
        if event.key == "down" and self.index < len(self.fields) - 1:
            self.focus_field(self.index + 1)
            return True
        return super().handle_key(event)

    def auth_headers(self) -> Dict[str, str]:
        raise NotImplementedError

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []
        label_width = max(len(label) for label, _ in self.fields) + 2
        lines = []
        for label, field in self.fields:
            lines.append(fit(label + ":", label_width) + field.render_line(self.width - label_width))
            lines.append("")
        return pad_block(lines, self.width, self.height)


class BasicAuthDetails(FieldStack):
    def __init__(self):
        self.username = TextField(placeholder="username", char_limit=256)
        self.password = TextField(placeholder="password", char_limit=256, masked=True)
        super().__init__([("Username", self.username), ("Password", self.password)])

    def auth_headers(self) -> Dict[str, str]:
        return basic_auth_header(self.username.value, self.password.value)


class TokenAuthDetails(FieldStack):
    """A single token sent as `Authorization: Bearer <token>`."""

    def __init__(self, label: str = "Token"):
        self.token = TextField(placeholder="token", char_limit=TOKEN_CHAR_LIMIT)
        super().__init__([(label, self.token)])

    def auth_headers(self) -> Dict[str, str]:
        return bearer_auth_header(self.token.value)


class APIKeyAuthDetails(FieldStack):
    DEFAULT_HEADER = "X-API-Key"

    def __init__(self):
        self.header_name = TextField(placeholder=self.DEFAULT_HEADER, char_limit=256)
        self.key = TextField(placeholder="key", char_limit=TOKEN_CHAR_LIMIT)
        super().__init__([("Header", self.header_name), ("Key", self.key)])

    def auth_headers(self) -> Dict[str, str]:
        if not self.key.value:
            return {}
        name = self.header_name.value.strip() or self.DEFAULT_HEADER
        return {name: self.key.value}


class AuthFocus(str, Enum):
    SELECTOR = "selector"
    DETAILS = "details"


class AuthContainer(Container):
    SELECTOR_WIDTH = 30

    def __init__(self, keys: Optional[SelectorKeys] = None):
        super().__init__()
        self.selector = Selector(AUTH_TYPE_LABELS, keys=keys, boxed=True, title="Auth Type")
        self.details: Dict[AuthType, Optional[FieldStack]] = {
            AuthType.NONE: None,
            AuthType.BASIC: BasicAuthDetails(),
            AuthType.BEARER: TokenAuthDetails("Token"),
            AuthType.JWT: TokenAuthDetails("JWT"),
            AuthType.OAUTH2: TokenAuthDetails("Access token"),
            AuthType.API_KEY: APIKeyAuthDetails(),
        }
        self.focus = AuthFocus.SELECTOR

    @property
    def auth_type(self) -> AuthType:
        return AuthType(self.selector.selected_index)

    @property
    def current_details(self) -> Optional[FieldStack]:
        return self.details[self.auth_type]

    def children(self) -> List[Widget]:
        return [self.selector] + [d for d in self.details.values() if d is not None]

    def selected_child(self) -> Optional[Widget]:
        if self.focus is AuthFocus.DETAILS and self.current_details is not None:
            return self.current_details
        return self.selector

    def focus_selector(self) -> None:
        self.focus = AuthFocus.SELECTOR
        self.refocus()

    def focus_details(self) -> None:
        if self.current_details is not None:
            self.focus = AuthFocus.DETAILS
            self.refocus()

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.active:
            return False

        if self.selected_child() is self.selector:
            if not self.selector.is_open and event.key == "down" and self.current_details is not None:
                self.focus_details()
                return True
            return self.selector.handle_key(event)

        details = self.current_details
        if event.key == "up" and details.at_first_field:
            self.focus_selector()
            return True
        return details.handle_key(event)

    def auth_headers(self) -> Dict[str, str]:
        details = self.current_details
        return details.auth_headers() if details is not None else {}

    def set_size(self, width: int, height: int) -> None:
        super().set_size(width, height)
        self.selector.set_size(min(self.SELECTOR_WIDTH, self.width), 3)
        for details in self.details.values():
            if details is not None:
                details.set_size(self.width, self.height - 4)

    def render(self) -> Block:
        if self.width <= 0 or self.height <= 0:
            return []

        lines = list(self.selector.render())
        if self.selector.is_open:
            lines.extend(self.selector.render_options(self.selector.width))
        lines.append("")

        details = self.current_details
        if details is None:
            lines.append("No authentication.")
        else:
            lines.extend(details.render())
        return pad_block(lines, self.width, self.height)
