
from __future__ import annotations
import re
import sys
from typing import NamedTuple, Optional, TextIO

from .engine import Minesweeper
from .errors import OutOfBounds
from .grid import Layer, Outcome
from .render import print_board

CLEAR_SCREEN = '\x1b[1;1H\x1b[2J'

_MOVE = re.compile(r'^\s*([A-Za-z])\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*$')
_QUIT = re.compile(r'^\s*q(uit)?\s*$', re.IGNORECASE)


class Command(NamedTuple):
    op: str
    row: int = 0
    col: int = 0


def parse_command(line: str) -> Command:
    """Parse 'd R, C', 'f R, C' or 'q'. Raises ValueError on anything else."""
    if _QUIT.match(line):
        return Command('q')
    m = _MOVE.match(line)
    if m is None:
        raise ValueError(f'expected "d ROW, COL", "f ROW, COL" or "q", got {line.strip()!r}')
    op = m.group(1).lower()
    if op not in ('d', 'f'):
        raise ValueError(f'unknown operation {m.group(1)!r}; use d (dig) or f (flag)')
    return Command(op, int(m.group(2)), int(m.group(3)))


def apply_command(game: Minesweeper, cmd: Command) -> Outcome:
    if cmd.op == 'd':
        return game.dig(cmd.row, cmd.col)
    if cmd.op == 'f':
        return game.flag(cmd.row, cmd.col)
    raise ValueError(f'cannot apply {cmd.op!r} to a board')


def board_cleared(game: Minesweeper) -> bool:
    # Win check lives here, not in the engine.
    if not game.generated or game.lost:
        return False
    return game.revealed_count() == game.rows * game.columns - game.num_mines


def clear_screen(stream: TextIO) -> None:
    stream.write(CLEAR_SCREEN)


def run(game: Minesweeper, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
        clear: bool = True, reveal: bool = False) -> str:
    """Read commands until the game is lost, cleared, or input ends.

    Returns 'win', 'loss' or 'quit'.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    def show(message: Optional[str] = None):
        if clear:
            clear_screen(stdout)
        print_board(game, stdout)
        if message:
            print(message, file=stdout)

    show()
    result = 'quit'
    while True:
        stdout.write('>')
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            cmd = parse_command(line)
        except ValueError as e:
            show(f'[play] {e}')
            continue
        if cmd.op == 'q':
            break
        try:
            outcome = apply_command(game, cmd)
        except OutOfBounds as e:
            show(f'[play] {e}')
            continue
        show()
        if outcome is Outcome.LOSS:
            result = 'loss'
            break
        if board_cleared(game):
            result = 'win'
            break

    if result != 'quit':
        print('\nWIN' if result == 'win' else '\nLOSE', file=stdout)
    if reveal and game.generated:
        print_board(game, stdout, Layer.TRUE)
    return result
