from lazypost_tui.widgets.busy_indicator import FRAMES, BusyIndicator

from helpers import FakeScheduler


def test_show_acquires_one_ticker() -> None:
    scheduler = FakeScheduler()
    busy = BusyIndicator(scheduler, interval=0.1)

    busy.show()
    busy.show("Still sending")

    assert len(scheduler.tickers) == 1
    assert scheduler.tickers[0].interval == 0.1
    assert busy.ticking
    assert busy.render() == f"{FRAMES[0]} Still sending"


def test_hide_stops_ticker() -> None:
    scheduler = FakeScheduler()
    busy = BusyIndicator(scheduler)
    busy.show()
    ticker = scheduler.tickers[0]

    ticker.fire()
    busy.hide()
    ticker.fire()

    assert ticker.stopped
    assert not busy.ticking
    assert busy.render() == ""


def test_frames_wrap_around() -> None:
    busy = BusyIndicator()
    busy.show()
    for _ in range(len(FRAMES) + 1):
        busy.tick()
    assert busy.frame == 1


def test_tick_while_hidden_does_nothing() -> None:
    busy = BusyIndicator()
    busy.tick()
    assert busy.frame == 0


def test_show_again_after_hide_acquires_new_ticker() -> None:
    scheduler = FakeScheduler()
    busy = BusyIndicator(scheduler)
    busy.show()
    busy.hide()
    busy.show()

    assert len(scheduler.tickers) == 2
    assert scheduler.tickers[0].stopped
    assert not scheduler.tickers[1].stopped
