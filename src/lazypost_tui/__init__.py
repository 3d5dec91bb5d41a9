"""
LazyPost TUI

A terminal client for composing HTTP requests and inspecting responses.

## Quick Start

```bash
lazypost                                   # empty request
lazypost --url https://httpbin.org/get     # pre-filled URL
python -m lazypost_tui --method POST --timeout 10
```

From Python:

```python
from lazypost_tui import LazyPostConfig, run_app

run_app(LazyPostConfig(default_url="https://httpbin.org/get"))
```

## Keys

```
alt+1 / f1   method          alt+4 / f4   result tab
alt+2 / f2   URL             alt+5 / f5   send
alt+3 / f3   query tab       tab          next inner tab
y            copy response   ctrl+y       copy request as cURL
esc          close dropdown / quit
```
"""

# Config
from .config import LazyPostConfig, LogLevel, get_config, set_config

# Errors
from .errors import LazyPostError, StartupError

# Core
from .core import (
    HttpRequest,
    RequestOutcome,
    KeyEvent,
    RouteResult,
    is_valid_url,
    is_valid_json,
    build_request,
    build_url_with_params,
)

# HTTP
from .http_client import RequestIssuer

# Widget engine
from .widgets import RootRouter, FocusTarget

# App
from .app import LazyPostApp, RequestCompleted

# Runner
from .runner import LazyPostRunner, run_app, main

# Handlers (utilities)
from .handlers import format_duration, format_response_headers, to_curl

# Loggers
from .loggers import setup_logging

__all__ = [
    # Config
    "LazyPostConfig",
    "LogLevel",
    "get_config",
    "set_config",
    # Errors
    "LazyPostError",
    "StartupError",
    # Core
    "HttpRequest",
    "RequestOutcome",
    "KeyEvent",
    "RouteResult",
    "is_valid_url",
    "is_valid_json",
    "build_request",
    "build_url_with_params",
    # HTTP
    "RequestIssuer",
    # Widgets
    "RootRouter",
    "FocusTarget",
    # App
    "LazyPostApp",
    "RequestCompleted",
    # Runner
    "LazyPostRunner",
    "run_app",
    "main",
    # Utilities
    "format_duration",
    "format_response_headers",
    "to_curl",
    # Loggers
    "setup_logging",
]
