import logging

import pytest

from lazypost_tui.widgets.router import FocusTarget, RootRouter

from helpers import FakeClipboard, FakeScheduler


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() detaches the package logger from the root logger; undo that per test."""
    logger = logging.getLogger("lazypost_tui")
    saved = (list(logger.handlers), logger.propagate, logger.level)
    yield
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers, logger.propagate, logger.level = saved[0], saved[1], saved[2]


@pytest.fixture
def dispatched():
    return []


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def router(dispatched, clipboard, scheduler):
    root = RootRouter(
        dispatcher=dispatched.append,
        clipboard=clipboard,
        scheduler=scheduler,
    )
    root.resize(120, 40)
    root.focus(FocusTarget.URL)
    return root
