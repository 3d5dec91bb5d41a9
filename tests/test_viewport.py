"""Tests for text wrapping and the scrollable viewport."""

import logging
import string

import pytest

from lazypost_tui.keymap import ViewportKeys
from lazypost_tui.widgets.viewport import ScrollViewport, wrap_text

from helpers import FakeClipboard, press

SAMPLES = [
    "",
    "short",
    "a" * 49,
    "b" * 50,
    "c" * 51,
    "line one\n\nline three is quite a bit longer than the others\n",
    "\n\n\n",
    string.ascii_letters * 7,
]


def make_viewport(width: int = 50, height: int = 6, clipboard=None, notify=None) -> ScrollViewport:
    viewport = ScrollViewport("placeholder", clipboard=clipboard or FakeClipboard(), notify=notify)
    viewport.set_size(width, height)
    viewport.set_active(True)
    return viewport


def test_long_single_line_wraps_into_four_chunks() -> None:
    content = (string.ascii_letters * 4)[:200]

    wrapped = wrap_text(content, 50)
    chunks = wrapped.split("\n")

    assert len(chunks) == 4
    assert all(len(chunk) <= 50 for chunk in chunks)
    assert "".join(chunks) == content


def test_viewport_wraps_at_its_width() -> None:
    viewport = make_viewport(width=50)
    viewport.set_content("x" * 200)
    assert viewport.total_lines == 4


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("width", [1, 3, 10, 50])
def test_wrap_is_idempotent(text: str, width: int) -> None:
    once = wrap_text(text, width)
    assert wrap_text(once, width) == once


def test_wrap_keeps_empty_lines() -> None:
    assert wrap_text("ab\n\ncd", 1) == "a\nb\n\nc\nd"


def test_wrap_with_no_width_returns_input() -> None:
    assert wrap_text("abc\ndef", 0) == "abc\ndef"
    assert wrap_text("abc", -3) == "abc"


def test_navigation_is_clamped() -> None:
    viewport = make_viewport(height=6)  # 5 content lines
    viewport.set_content("\n".join(str(i) for i in range(20)))
    assert viewport.max_offset == 15

    press(viewport, "up")
    assert viewport.line_offset == 0

    press(viewport, "down", "j")
    assert viewport.line_offset == 2

    press(viewport, "pagedown")
    assert viewport.line_offset == 7

    press(viewport, "ctrl+d")
    assert viewport.line_offset == 9

    press(viewport, "ctrl+u")
    assert viewport.line_offset == 7

    press(viewport, "end")
    assert viewport.line_offset == 15

    press(viewport, "pagedown", "down")
    assert viewport.line_offset == 15

    press(viewport, "pageup")
    assert viewport.line_offset == 10

    press(viewport, "home")
    assert viewport.line_offset == 0


def test_new_content_scrolls_to_top() -> None:
    viewport = make_viewport(height=3)
    viewport.set_content("\n".join("x" * 10 for _ in range(10)))
    press(viewport, "end")

    viewport.set_content("fresh")

    assert viewport.line_offset == 0


def test_resize_keeps_offset_when_possible() -> None:
    viewport = make_viewport(width=50, height=3)
    viewport.set_content("\n".join(str(i) for i in range(10)))
    press(viewport, "down", "down", "down")

    viewport.set_size(60, 3)

    assert viewport.line_offset == 3


def test_resize_clamps_offset_to_new_line_count() -> None:
    viewport = make_viewport(width=50, height=3)
    viewport.set_content("y" * 200)
    press(viewport, "end")
    assert viewport.line_offset == 2

    viewport.set_size(100, 3)

    assert viewport.total_lines == 2
    assert viewport.line_offset == 0


def test_widening_reflows_from_display_text() -> None:
    viewport = make_viewport(width=10, height=10)
    viewport.set_content("z" * 40)
    assert viewport.total_lines == 4

    viewport.set_size(40, 10)

    assert viewport.total_lines == 1


def test_copy_uses_raw_content() -> None:
    clipboard = FakeClipboard()
    viewport = make_viewport(width=10, clipboard=clipboard)
    raw = '{"a":1,"b":"' + "x" * 30 + '"}'
    viewport.set_content(raw, display='{\n  "a": 1\n}')

    press(viewport, "y")

    assert clipboard.copied == [raw]


def test_copy_failure_is_only_logged(caplog) -> None:
    notices = []
    viewport = make_viewport(clipboard=FakeClipboard(succeed=False), notify=notices.append)
    viewport.set_content("data")

    with caplog.at_level(logging.WARNING, logger="lazypost_tui"):
        assert press(viewport, "y") == [True]

    assert "no clipboard" in caplog.text
    assert notices == []


def test_copy_success_notifies() -> None:
    notices = []
    viewport = make_viewport(notify=notices.append)
    press(viewport, "y")
    assert notices == ["Copied to clipboard!"]


def test_inactive_viewport_ignores_keys() -> None:
    viewport = ScrollViewport("text")
    viewport.set_size(20, 5)
    assert press(viewport, "down", "y") == [False, False]


def test_render_fills_area() -> None:
    viewport = make_viewport(width=20, height=4)
    viewport.set_content("hello\nworld")

    lines = viewport.render()

    assert len(lines) == 4
    assert lines[0].rstrip() == "hello"
    assert all(len(line) == 20 for line in lines)


def test_zero_size_renders_empty() -> None:
    viewport = make_viewport(width=0, height=0)
    viewport.set_content("anything")
    assert viewport.render() == []


def test_vim_style_top_and_bottom() -> None:
    viewport = make_viewport(height=3)
    viewport.set_content("\n".join(str(i) for i in range(10)))

    press(viewport, "G")
    assert viewport.line_offset == viewport.max_offset == 8

    press(viewport, "g")
    assert viewport.line_offset == 0


def test_footer_names_configured_copy_key() -> None:
    viewport = ScrollViewport("text", keys=ViewportKeys(copy=("c",)))
    viewport.set_size(30, 3)

    assert viewport.footer() == "all • c copy"
    assert viewport.render()[-1].rstrip() == "all • c copy"
