
from __future__ import annotations


class GridsweepError(Exception):
    pass


class InvalidConfiguration(GridsweepError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class OutOfBounds(GridsweepError, IndexError):
    def __init__(self, row: int, col: int, rows: int, columns: int):
        super().__init__(f'cell ({row}, {col}) is outside the {rows}x{columns} board')
        self.row = row
        self.col = col
        self.rows = rows
        self.columns = columns
