from __future__ import annotations
from typing import List

from models import EMPTY, Field, OCCUPIED, UNAVAILABLE
from wcwidth import wcswidth

# fixed-width layout for labelled cells
CELL_WIDTH = 2

COLUMNS = "ABCDEFGHIJ"

# text symbols for field rendering
EMPTY_SYMBOL = "."
UNAVAILABLE_SYMBOL = " "
OCCUPIED_SYMBOL = "X"

SYMBOLS = {
    EMPTY: EMPTY_SYMBOL,
    UNAVAILABLE: UNAVAILABLE_SYMBOL,
    OCCUPIED: OCCUPIED_SYMBOL,
}


def cell_symbol(state: int) -> str:
    try:
        return SYMBOLS[state]
    except KeyError:
        raise ValueError(f"Unknown cell state: {state!r}") from None


def format_cell(symbol: str) -> str:
    """Pad cell contents so that the labelled grid remains aligned.

    The visual width is measured with ``wcswidth`` so that wide row labels
    and symbols line up with single-column ones.  Content already at least
    ``CELL_WIDTH`` columns wide, or whose width cannot be determined, is
    returned unchanged.
    """
    width = wcswidth(symbol)
    if width < 0 or width >= CELL_WIDTH:
        return symbol
    slack = CELL_WIDTH - width
    left_pad = (slack + 1) // 2
    right_pad = slack - left_pad
    return (" " * left_pad) + symbol + (" " * right_pad)


COL_HEADERS = ''.join(format_cell(letter) for letter in COLUMNS)
HEADER_PREFIX = format_cell("") + "| "


def render_field(field: Field) -> str:
    """Return the plain grid: one line of 10 symbols per row."""
    lines = [''.join(cell_symbol(v) for v in row) for row in field.rows()]
    return '\n'.join(lines) + '\n'


def render_field_labeled(field: Field) -> str:
    lines: List[str] = [HEADER_PREFIX + COL_HEADERS]
    for y, row in enumerate(field.rows()):
        cells = ''.join(format_cell(cell_symbol(v)) for v in row)
        row_label = format_cell(str(y + 1))
        lines.append(f"{row_label}| " + cells)
    return '\n'.join(lines) + '\n'
