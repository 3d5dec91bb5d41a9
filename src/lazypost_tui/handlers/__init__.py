"""
LazyPost Handlers Module

Formatting utilities for responses and requests.
"""

from .response_handler import (
    format_duration,
    format_status_line,
    format_response_headers,
    format_body_for_display,
    to_curl,
)

__all__ = [
    "format_duration",
    "format_status_line",
    "format_response_headers",
    "format_body_for_display",
    "to_curl",
]
