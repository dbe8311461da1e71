"""
Shared fixtures: seeded sessions and boards built from hand-drawn layouts.
"""
from collections import deque

import numpy as np
import pytest

from gridsweep.engine import Minesweeper
from gridsweep.generator import count_neighbors
from gridsweep.grid import CLEAR, MINE, neighbors


def layout_grid(lines):
    """'*' is a mine, anything else is empty; counts are derived."""
    grid = np.array([[MINE if ch == '*' else CLEAR for ch in line] for line in lines], dtype=np.int8)
    count_neighbors(grid)
    return grid


def board_from_layout(lines) -> Minesweeper:
    grid = layout_grid(lines)
    rows, columns = grid.shape
    game = Minesweeper(rows, columns, int((grid == MINE).sum()), seed=0)
    game.grid = grid
    return game


def expected_closure(grid, start):
    """Cells a dig on a clear start cell should reveal, by plain BFS."""
    rows, columns = grid.shape
    seen = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if grid[r, c] != CLEAR:
            continue
        for n in neighbors(r, c, rows, columns):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


@pytest.fixture
def layout():
    return board_from_layout


@pytest.fixture
def seeded_game() -> Minesweeper:
    """A 10x10 board with 20 mines and a fixed seed."""
    return Minesweeper(10, 10, 20, seed=1234)


@pytest.fixture
def small_game() -> Minesweeper:
    return Minesweeper(5, 5, 3, seed=7)
