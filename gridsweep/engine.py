
from __future__ import annotations
from typing import List, Optional
import numpy as np

from .errors import OutOfBounds
from .generator import check_dimensions, generate, make_rng
from .grid import (CLEAR, FLAG, MINE, UNKNOWN, Coordinate, Layer, Outcome,
                   glyph, in_bounds, neighbors)


class Minesweeper:
    """One game session: a hidden true grid and the player's visible grid.

    The true grid does not exist until the first dig, which is generated so
    that the dug cell is clear.
    """

    def __init__(self, rows: int, columns: int, num_mines: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        check_dimensions(rows, columns, num_mines)
        self.rows = rows
        self.columns = columns
        self.num_mines = num_mines
        self.rng = rng if rng is not None else make_rng(seed)
        self.visible = np.full((rows, columns), UNKNOWN, dtype=np.int8)
        self.grid: Optional[np.ndarray] = None

    @classmethod
    def create(cls, rows: int, columns: int, num_mines: int, **kwargs) -> 'Minesweeper':
        return cls(rows, columns, num_mines, **kwargs)

    @property
    def generated(self) -> bool:
        return self.grid is not None

    @property
    def lost(self) -> bool:
        return bool((self.visible == MINE).any())

    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col, self.rows, self.columns)

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        return neighbors(row, col, self.rows, self.columns)

    def index(self, row: int, col: int) -> int:
        return row * self.columns + col

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.columns)

    def dig(self, row: int, col: int) -> Outcome:
        self._check(row, col)
        if self.grid is None:
            self.grid = generate(self.rows, self.columns, self.num_mines, (row, col), rng=self.rng)
        grid, visible = self.grid, self.visible

        if visible[row, col] == FLAG:
            return Outcome.NEUTRAL
        if grid[row, col] == MINE:
            visible[row, col] = MINE
            return Outcome.LOSS
        if grid[row, col] == CLEAR:
            self._flood(row, col)
        else:
            visible[row, col] = grid[row, col]
        return Outcome.CONTINUE

    def _flood(self, row: int, col: int) -> None:
        # Work-list over the zero region; each cell is finalized before its
        # neighbors are pushed, so nothing is expanded twice.
        grid, visible = self.grid, self.visible
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            if visible[r, c] != UNKNOWN:
                continue
            visible[r, c] = grid[r, c]
            if grid[r, c] != CLEAR:
                continue
            for nr, nc in self.neighbors(r, c):
                if visible[nr, nc] == UNKNOWN:
                    stack.append((nr, nc))

    def flag(self, row: int, col: int) -> Outcome:
        self._check(row, col)
        if self.visible[row, col] == UNKNOWN:
            self.visible[row, col] = FLAG
        return Outcome.OK

    def layer(self, which: Layer = Layer.VISIBLE) -> Optional[np.ndarray]:
        """Read-only view of one grid; the true grid is None before the first dig."""
        buf = self.visible if which is Layer.VISIBLE else self.grid
        if buf is None:
            return None
        view = buf.view()
        view.flags.writeable = False
        return view

    def codes(self, which: Layer = Layer.VISIBLE) -> Optional[List[str]]:
        """Row-major display glyphs for one grid, or None if it does not exist yet."""
        buf = self.layer(which)
        if buf is None:
            return None
        return [glyph(int(v)) for v in buf.reshape(-1)]

    def revealed_count(self) -> int:
        return int((self.visible >= CLEAR).sum())
