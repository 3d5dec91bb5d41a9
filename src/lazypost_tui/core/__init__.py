"""
LazyPost Core

Models, input events, validators and request assembly.
"""

from .models import HttpRequest, RequestOutcome
from .events import KeyEvent, RouteResult
from .validators import is_valid_url, is_valid_json
from .request_builder import (
    build_url_with_params,
    basic_auth_header,
    bearer_auth_header,
    merge_headers,
    build_request,
)

__all__ = [
    # Models
    "HttpRequest",
    "RequestOutcome",
    # Events
    "KeyEvent",
    "RouteResult",
    # Validators
    "is_valid_url",
    "is_valid_json",
    # Request assembly
    "build_url_with_params",
    "basic_auth_header",
    "bearer_auth_header",
    "merge_headers",
    "build_request",
]
