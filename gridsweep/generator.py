
from __future__ import annotations
from typing import Optional
import numpy as np

from .errors import InvalidConfiguration
from .grid import CLEAR, MINE, Coordinate, in_bounds, neighbors

# Random draws allowed for one generate() call, across all regenerations,
# as a multiple of cells * mines.
DRAW_FACTOR = 64


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(None if seed is None else int(seed))


def check_dimensions(rows: int, columns: int, mine_count: int) -> None:
    if rows <= 0 or columns <= 0:
        raise InvalidConfiguration(f'board dimensions must be positive, got {rows}x{columns}')
    if not 0 <= mine_count < rows * columns:
        raise InvalidConfiguration(
            f'mine count must be in [0, {rows * columns}) for a {rows}x{columns} board, got {mine_count}')


def place_mines(grid: np.ndarray, mine_count: int, rng: np.random.Generator,
                max_draws: Optional[int] = None) -> int:
    """Rejection-sample mine_count distinct cells of a CLEAR grid into MINE.

    Returns the number of draws used.
    """
    flat = grid.reshape(-1)
    ncells = flat.size
    if max_draws is None:
        max_draws = ncells * max(mine_count, 1) * DRAW_FACTOR
    remaining = mine_count
    draws = 0
    while remaining > 0:
        if draws >= max_draws:
            raise InvalidConfiguration(
                f'gave up placing {mine_count} mines in {ncells} cells after {draws} draws')
        for i in rng.integers(ncells, size=min(ncells, max_draws - draws)):
            draws += 1
            if flat[i] == CLEAR:
                flat[i] = MINE
                remaining -= 1
                if remaining == 0:
                    break
    return draws


def count_neighbors(grid: np.ndarray) -> None:
    # Each mine bumps every non-mine neighbor once.
    rows, columns = grid.shape
    for r, c in zip(*np.nonzero(grid == MINE)):
        for nr, nc in neighbors(int(r), int(c), rows, columns):
            if grid[nr, nc] != MINE:
                grid[nr, nc] += 1


def generate(rows: int, columns: int, mine_count: int, must_be_clear: Coordinate,
             rng: Optional[np.random.Generator] = None, max_draws: Optional[int] = None) -> np.ndarray:
    """Build a true grid whose must_be_clear cell has no mine and a zero count.

    Whole boards are sampled and discarded until the required cell comes out
    CLEAR, so every accepted board is drawn uniformly from the boards that
    satisfy the constraint. All rounds share one budget of max_draws random
    draws; running out raises InvalidConfiguration.
    """
    check_dimensions(rows, columns, mine_count)
    r0, c0 = must_be_clear
    if not in_bounds(r0, c0, rows, columns):
        raise InvalidConfiguration(f'required clear cell ({r0}, {c0}) is outside the {rows}x{columns} board')
    # The cell and all of its neighbors have to stay mine-free.
    guard = [(r0, c0)] + neighbors(r0, c0, rows, columns)
    free = rows * columns - len(guard)
    if mine_count > free:
        raise InvalidConfiguration(
            f'{mine_count} mines cannot fit around a clear cell at ({r0}, {c0}); at most {free} fit')
    if rng is None:
        rng = make_rng()
    if max_draws is None:
        max_draws = rows * columns * max(mine_count, 1) * DRAW_FACTOR

    grid = np.empty((rows, columns), dtype=np.int8)
    used = 0
    while mine_count == 0 or used < max_draws:
        grid.fill(CLEAR)
        try:
            used += place_mines(grid, mine_count, rng, max_draws - used)
        except InvalidConfiguration:
            break
        if all(grid[r, c] != MINE for r, c in guard):
            count_neighbors(grid)
            return grid
    raise InvalidConfiguration(
        f'no board with a clear cell at ({r0}, {c0}) within {max_draws} draws '
        f'({mine_count} mines on {rows}x{columns})')
