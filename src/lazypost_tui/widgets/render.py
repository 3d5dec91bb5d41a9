"""
Plain-text rendering primitives.

A rendered block is a list of lines, every line exactly as wide (in
terminal cells) as the block. A zero-sized block is an empty list.
"""

from typing import List, Sequence

from rich.cells import cell_len, get_character_cell_size, set_cell_size

LIGHT_BORDER = ("╭", "─", "╮", "│", "╰", "╯")
HEAVY_BORDER = ("┏", "━", "┓", "┃", "┗", "┛")

Block = List[str]


def fit(text: str, width: int) -> str:
    """Crop or pad `text` to exactly `width` cells."""
    if width <= 0:
        return ""
    return set_cell_size(text, width)


def center(text: str, width: int) -> str:
    if width <= 0:
        return ""
    gap = max(0, width - cell_len(text))
    return fit(" " * (gap // 2) + text, width)


def blank(width: int, height: int) -> Block:
    if width <= 0 or height <= 0:
        return []
    return [" " * width] * height


def pad_block(lines: Sequence[str], width: int, height: int) -> Block:
    """Fit `lines` into a `width` x `height` block, cropping or padding."""
    if width <= 0 or height <= 0:
        return []
    block = [fit(line, width) for line in lines[:height]]
    block.extend([" " * width] * (height - len(block)))
    return block


def box(lines: Sequence[str], width: int, height: int, active: bool = False, title: str = "") -> Block:
    """
    Draw a border around `lines`.

    Active boxes use a heavy border so the focused region is visible
    without colors.
    """
    if width <= 0 or height <= 0:
        return []
    if width < 2 or height < 2:
        return blank(width, height)

    tl, h, tr, v, bl, br = HEAVY_BORDER if active else LIGHT_BORDER
    inner_width = width - 2

    label = f"{h} {title} " if title else ""
    top = tl + fit(label + h * inner_width, inner_width) + tr
    if inner_width > 0:
        middle = [v + line + v for line in pad_block(lines, inner_width, height - 2)]
    else:
        middle = [v + v] * (height - 2)
    bottom = bl + h * inner_width + br
    return [top] + middle + [bottom]


def join_horizontal(blocks: Sequence[Block], gap: int = 1) -> Block:
    """Place blocks side by side, top aligned."""
    blocks = [block for block in blocks if block]
    if not blocks:
        return []

    height = max(len(block) for block in blocks)
    widths = [max(cell_len(line) for line in block) for block in blocks]
    padded = [pad_block(block, w, height) for block, w in zip(blocks, widths)]

    spacer = " " * gap
    return [spacer.join(block[row] for block in padded) for row in range(height)]


def _split_at_cell(text: str, position: int):
    """Split `text` at a cell offset, padding a wide character that straddles it."""
    total = 0
    for index, char in enumerate(text):
        size = get_character_cell_size(char)
        if total + size > position:
            head = text[:index] + " " * (position - total)
            tail_pad = " " * (total + size - position) if total < position else ""
            return head, tail_pad + text[index + (1 if total < position else 0):]
        total += size
    return text + " " * (position - total), ""


def overlay(base: Block, block: Sequence[str], x: int, y: int) -> Block:
    """Draw `block` over `base` with its top-left corner at (x, y), cropped to `base`."""
    if not base or not block:
        return list(base)

    width = cell_len(base[0])
    if x >= width:
        return list(base)

    result = list(base)
    for offset, line in enumerate(block):
        row = y + offset
        if row < 0 or row >= len(result):
            continue
        piece = fit(line, min(cell_len(line), width - x))
        left, rest = _split_at_cell(result[row], x)
        _, right = _split_at_cell(rest, cell_len(piece))
        result[row] = fit(left + piece + right, width)
    return result
