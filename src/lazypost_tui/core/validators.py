"""
LazyPost Core - Validators

Boolean checks run before a request is dispatched.
"""

import json
import re

_WHITESPACE = re.compile(r"\s")
_URL_PATTERN = re.compile(
    r"^(http|https)://[a-zA-Z0-9]+([-.][a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}"
    r"(:[0-9]{1,5})?(/[^?#]*)?(\?[^#]*)?(#.*)?$"
)
_PORT_PATTERN = re.compile(r":([0-9]+)")

MAX_PORT = 65535


def is_valid_url(url: str) -> bool:
    """
    Check that `url` is an absolute http(s) URL with a named host.

    Accepted: scheme, host with a TLD of two or more letters, optional port
    (0-65535), path, query and fragment. Whitespace, IP literals and hosts
    without a TLD (e.g. localhost) are rejected.
    """
    if not url:
        return False

    if _WHITESPACE.search(url):
        return False

    if not _URL_PATTERN.match(url):
        return False

    port_match = _PORT_PATTERN.search(url)
    if port_match and int(port_match.group(1)) > MAX_PORT:
        return False

    return True


def is_valid_json(text: str) -> bool:
    """An empty string means "no body" and is accepted."""
    if text == "":
        return True
    try:
        json.loads(text)
    except ValueError:
        return False
    return True
