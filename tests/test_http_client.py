from types import SimpleNamespace

import requests

from lazypost_tui.core.models import HttpRequest
from lazypost_tui.http_client import RequestIssuer


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def test_issue_returns_response_fields() -> None:
    response = SimpleNamespace(
        status_code=201,
        reason="Created",
        headers={"Content-Type": "application/json"},
        text='{"id": 1}',
    )
    session = FakeSession(response=response)
    issuer = RequestIssuer(timeout=3.0, verify_tls=False, session=session)

    outcome = issuer.issue(
        HttpRequest(method="POST", url="https://example.com", headers={"A": "b"}, body='{"x": 1}')
    )

    assert outcome.succeeded
    assert outcome.status_code == 201
    assert outcome.reason == "Created"
    assert outcome.headers == {"Content-Type": "application/json"}
    assert outcome.body == '{"id": 1}'
    assert outcome.duration_ms >= 0

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "https://example.com")
    assert kwargs == {
        "headers": {"A": "b"},
        "data": b'{"x": 1}',
        "timeout": 3.0,
        "verify": False,
    }


def test_empty_body_is_not_sent() -> None:
    response = SimpleNamespace(status_code=200, reason="OK", headers={}, text="")
    session = FakeSession(response=response)

    RequestIssuer(session=session).issue(HttpRequest(url="https://example.com"))

    assert session.calls[0][2]["data"] is None


def test_network_error_becomes_outcome() -> None:
    session = FakeSession(error=requests.ConnectionError("connection refused"))

    outcome = RequestIssuer(session=session).issue(HttpRequest(url="https://example.com"))

    assert not outcome.succeeded
    assert outcome.error == "connection refused"
    assert outcome.status_code is None


def test_close_closes_session() -> None:
    session = FakeSession()
    RequestIssuer(session=session).close()
    assert session.closed


def test_unencodable_header_becomes_outcome() -> None:
    session = FakeSession(
        error=UnicodeEncodeError("latin-1", "k€y", 1, 2, "ordinal not in range(256)")
    )

    outcome = RequestIssuer(session=session).issue(
        HttpRequest(url="https://example.com", headers={"X-Api-Key": "k€y"})
    )

    assert not outcome.succeeded
    assert "latin-1" in outcome.error
