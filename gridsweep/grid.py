
from __future__ import annotations
from enum import Enum
from typing import List, Tuple

Coordinate = Tuple[int, int]

# Cell codes shared by the true and visible grids (int8).
# On the visible grid MINE marks a detonated mine.
MINE = -1
CLEAR = 0
FLAG = -2
UNKNOWN = -3

GLYPHS = {
    MINE: '*',
    CLEAR: ' ',
    FLAG: 'F',
    UNKNOWN: '#',
}

# Offsets of the eight neighbors, row-major.
OFFSETS: Tuple[Coordinate, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Layer(Enum):
    TRUE = 'true'
    VISIBLE = 'visible'


class Outcome(Enum):
    LOSS = 'loss'
    NEUTRAL = 'neutral'
    CONTINUE = 'continue'
    OK = 'ok'


def in_bounds(row: int, col: int, rows: int, columns: int) -> bool:
    return 0 <= row < rows and 0 <= col < columns


def neighbors(row: int, col: int, rows: int, columns: int) -> List[Coordinate]:
    """In-bounds 8-neighbors of (row, col).

    The center itself is not checked, so a cell just off the board still
    yields the on-board cells around it.
    """
    coords = []
    for dr, dc in OFFSETS:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, rows, columns):
            coords.append((nr, nc))
    return coords


def glyph(code: int) -> str:
    if code > 0:
        return str(code)
    return GLYPHS[code]
