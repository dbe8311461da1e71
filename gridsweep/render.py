
from __future__ import annotations
import sys
from typing import List, Optional, TextIO

from .grid import Layer

NOT_GENERATED = '(board not generated yet)'


def format_board(codes: Optional[List[str]], rows: int, columns: int) -> str:
    """Lay out row-major glyphs under a column ruler, one labelled line per row."""
    if codes is None:
        return NOT_GENERATED
    tens = ''.join(str(i // 10 % 10) if i % 10 == 0 else ' ' for i in range(columns))
    ones = ''.join(str(i % 10) for i in range(columns))
    lines = [
        '  | ' + tens,
        '  | ' + ones,
        '--|-' + '-' * columns,
    ]
    for r in range(rows):
        lines.append(f'{r:2d}| ' + ''.join(codes[r * columns:(r + 1) * columns]))
    return '\n'.join(lines)


def print_board(game, stream: Optional[TextIO] = None, which: Layer = Layer.VISIBLE) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(format_board(game.codes(which), game.rows, game.columns) + '\n')


def render_ascii(game, which: Layer = Layer.VISIBLE) -> str:
    codes = game.codes(which)
    if codes is None:
        return NOT_GENERATED
    rows = []
    for r in range(game.rows):
        rows.append(' '.join(codes[r * game.columns:(r + 1) * game.columns]))
    return '\n'.join(rows)
