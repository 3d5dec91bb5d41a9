from rich.cells import cell_len

from lazypost_tui.widgets.render import box, center, fit, join_horizontal, overlay, pad_block


def test_fit_crops_and_pads() -> None:
    assert fit("hello", 3) == "hel"
    assert fit("hi", 4) == "hi  "
    assert fit("x", 0) == ""


def test_fit_counts_wide_characters() -> None:
    assert cell_len(fit("日本語", 5)) == 5


def test_center() -> None:
    assert center("ab", 6) == "  ab  "


def test_pad_block() -> None:
    assert pad_block(["a", "b", "c"], 2, 2) == ["a ", "b "]
    assert pad_block(["a"], 2, 3) == ["a ", "  ", "  "]
    assert pad_block(["a"], 0, 3) == []


def test_box_borders() -> None:
    assert box(["hi"], 6, 3) == ["╭────╮", "│hi  │", "╰────╯"]
    assert box(["hi"], 6, 3, active=True)[0] == "┏━━━━┓"


def test_box_title() -> None:
    assert box([], 12, 3, title="URL")[0] == "╭─ URL ────╮"


def test_box_degenerate_sizes() -> None:
    assert box(["x"], 1, 1) == [" "]
    assert box(["x"], 2, 3) == ["╭╮", "││", "╰╯"]
    assert box(["x"], 0, 3) == []


def test_join_horizontal_pads_shorter_block() -> None:
    assert join_horizontal([["ab", "cd"], ["x"]]) == ["ab x", "cd  "]


def test_overlay_places_block() -> None:
    base = ["......", "......", "......"]
    assert overlay(base, ["XY"], 2, 1) == ["......", "..XY..", "......"]


def test_overlay_is_cropped_to_base() -> None:
    base = ["....", "...."]
    assert overlay(base, ["XYZ", "XYZ", "XYZ"], 2, 1) == ["....", "..XY"]
