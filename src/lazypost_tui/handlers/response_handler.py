"""
LazyPost Handlers - Response Handler

Formatting of outcomes and requests for display and export.
"""

import json
import shlex
from typing import Optional

from ..core.models import HttpRequest, RequestOutcome


def format_duration(ms: Optional[float]) -> str:
    """Format duration in human-readable form"""
    if ms is None:
        return "N/A"

    if ms < 1:
        return f"{ms * 1000:.2f}μs"
    elif ms < 1000:
        return f"{ms:.2f}ms"
    else:
        return f"{ms / 1000:.2f}s"


def format_status_line(outcome: RequestOutcome) -> str:
    status = f"Status: {outcome.status_code} {outcome.reason}".rstrip()
    if outcome.duration_ms is not None:
        status += f" ({format_duration(outcome.duration_ms)})"
    return status


def format_response_headers(outcome: RequestOutcome) -> str:
    """
    Text shown in the response headers pane.

    Example:
        Status: 200 OK (12.30ms)

        Content-Type: application/json
        Content-Length: 42
    """
    lines = [format_status_line(outcome), ""]
    lines.extend(f"{name}: {value}" for name, value in outcome.headers.items())
    return "\n".join(lines)


def format_body_for_display(body: str, pretty: bool = True) -> str:
    """Pretty-print JSON bodies; anything else is shown as received."""
    if not pretty or not body.strip():
        return body
    try:
        data = json.loads(body)
    except ValueError:
        return body
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_curl(request: HttpRequest) -> str:
    """Render the request as an equivalent cURL command."""
    parts = [f"curl -X {request.method} {shlex.quote(request.url)}"]

    for name, value in request.headers.items():
        parts.append(f"-H {shlex.quote(f'{name}: {value}')}")

    if request.body:
        parts.append(f"-d {shlex.quote(request.body)}")

    return " \\\n  ".join(parts)
