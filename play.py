from __future__ import annotations
import argparse
import sys
import numpy as np

from gridsweep.engine import Minesweeper
from gridsweep.errors import InvalidConfiguration
from gridsweep.session import run


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play minesweeper in the terminal: "d R, C" digs, "f R, C" flags, "q" quits.')
    parser.add_argument('--rows', type=int, default=10)
    parser.add_argument('--columns', type=int, default=10)
    parser.add_argument('--mines', type=int, default=20)
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--no-clear', action='store_true', help='Do not clear the screen between moves')
    parser.add_argument('--reveal', action='store_true', help='Print the true board when the game ends')
    args = parser.parse_args(argv)

    # Draw a concrete seed so an OS-entropy game can be replayed.
    seed = int(np.random.default_rng().integers(1_000_000_000)) if args.seed < 0 else args.seed
    try:
        game = Minesweeper.create(args.rows, args.columns, args.mines, seed=seed)
    except InvalidConfiguration as e:
        parser.error(str(e))
    print(f"[play] {args.rows}x{args.columns} board, {args.mines} mines, seed {seed}")

    try:
        result = run(game, clear=not args.no_clear, reveal=args.reveal)
    except InvalidConfiguration as e:
        print(f'[play] {e}', file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print('\n[play] Interrupted.')
        return 130
    if result == 'quit':
        print('\n[play] Quit.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
