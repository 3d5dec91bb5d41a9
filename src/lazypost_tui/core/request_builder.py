"""
LazyPost Core - Request Builder

Turns the values collected from the widgets into an HttpRequest.
"""

import base64
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .models import HttpRequest

JSON_CONTENT_TYPE = "application/json"


def build_url_with_params(url: str, params: Mapping[str, str]) -> str:
    """Merge `params` into the query string of `url`, later values win."""
    if not params:
        return url

    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.update(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def basic_auth_header(username: str, password: str) -> Dict[str, str]:
    if not username and not password:
        return {}
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def bearer_auth_header(token: str) -> Dict[str, str]:
    token = token.strip()
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def merge_headers(*header_sets: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Combine header mappings left to right.

    Names are compared case-insensitively; a later set replaces an earlier
    header of the same name.
    """
    merged: Dict[str, str] = {}
    for headers in header_sets:
        if not headers:
            continue
        for name, value in headers.items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


def build_request(
    method: str,
    url: str,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
    auth_headers: Optional[Mapping[str, str]] = None,
    body: str = "",
) -> HttpRequest:
    """Assemble the request exactly as it will go over the wire."""
    all_headers = merge_headers(headers, auth_headers)

    if body and not any(name.lower() == "content-type" for name in all_headers):
        all_headers["Content-Type"] = JSON_CONTENT_TYPE

    return HttpRequest(
        method=method,
        url=build_url_with_params(url, params or {}),
        headers=all_headers,
        body=body,
    )
