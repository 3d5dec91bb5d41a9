"""End-to-end tests driving the Textual host with a pilot."""

from lazypost_tui.app import LazyPostApp
from lazypost_tui.config import LazyPostConfig
from lazypost_tui.core.models import RequestOutcome
from lazypost_tui.http_client import RequestIssuer
from lazypost_tui.widgets.router import INVALID_URL_MESSAGE
from lazypost_tui.widgets.tabs_container import OuterTab


class FakeIssuer:
    def __init__(self, outcome: RequestOutcome):
        self.outcome = outcome
        self.requests = []
        self.closed = False

    def issue(self, request):
        self.requests.append(request)
        return self.outcome

    def close(self) -> None:
        self.closed = True


def make_app(url: str, outcome: RequestOutcome = None) -> LazyPostApp:
    config = LazyPostConfig(default_url=url, show_banner=False)
    issuer = FakeIssuer(outcome or RequestOutcome(status_code=200, reason="OK"))
    return LazyPostApp(config=config, issuer=issuer)


async def test_invalid_url_shows_notice() -> None:
    app = make_app("notaurl")
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("f5")
        await pilot.pause()

        assert app.router.toast.message == INVALID_URL_MESSAGE
        assert app.issuer.requests == []


async def test_request_round_trip() -> None:
    outcome = RequestOutcome(
        status_code=200,
        reason="OK",
        headers={"Content-Type": "application/json"},
        body='{"ok": true}',
        duration_ms=1.0,
    )
    app = make_app("https://example.com/api", outcome)
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("f5")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert [r.url for r in app.issuer.requests] == ["https://example.com/api"]
        assert app.router.tabs.active_index == OuterTab.RESULT
        assert app.router.tabs.result.body_view.raw_content == '{"ok": true}'
        assert not app.router.busy.visible
    assert app.issuer.closed


async def test_default_method_applied() -> None:
    config = LazyPostConfig(default_url="https://example.com", default_method="DELETE", show_banner=False)
    app = LazyPostApp(config=config, issuer=FakeIssuer(RequestOutcome()))
    async with app.run_test(size=(100, 40)):
        assert app.router.method.value == "DELETE"
        assert app.router.url.value == "https://example.com"


async def test_escape_quits() -> None:
    app = make_app("https://example.com")
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("escape")
        await pilot.pause()
    assert app.return_code == 0


class FailingIssuer(FakeIssuer):
    def issue(self, request):
        self.requests.append(request)
        raise RuntimeError("boom")


class UnencodableSession:
    def request(self, method, url, **kwargs):
        raise UnicodeEncodeError("latin-1", "t€k", 1, 2, "ordinal not in range(256)")

    def close(self) -> None:
        pass


async def test_crashing_issuer_still_completes_request() -> None:
    config = LazyPostConfig(default_url="https://example.com", show_banner=False)
    app = LazyPostApp(config=config, issuer=FailingIssuer(RequestOutcome()))
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("f5")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert len(app.issuer.requests) == 1
        assert not app.router.in_flight
        assert not app.router.busy.visible
        assert app.router.toast.message == "Error: boom"


async def test_unencodable_header_reports_error() -> None:
    config = LazyPostConfig(default_url="https://example.com", show_banner=False)
    issuer = RequestIssuer(session=UnencodableSession())
    app = LazyPostApp(config=config, issuer=issuer)
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("f5")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert not app.router.in_flight
        assert app.router.toast.message.startswith("Error: ")
        assert "latin-1" in app.router.toast.message
