import io

from gridsweep.engine import Minesweeper
from gridsweep.grid import Layer
from gridsweep.render import NOT_GENERATED, format_board, print_board, render_ascii


def test_format_board_ruler_and_rows():
    text = format_board(list('#1F*' '  23'), 2, 4)
    assert text.splitlines() == [
        '  | 0   ',
        '  | 0123',
        '--|-----',
        ' 0| #1F*',
        ' 1|   23',
    ]


def test_format_board_tens_row_past_ten_columns():
    lines = format_board(['#'] * 12, 1, 12).splitlines()
    assert lines[0] == '  | 0         1 '
    assert lines[1] == '  | 012345678901'
    assert lines[2] == '--|-' + '-' * 12


def test_row_labels_are_two_wide():
    lines = format_board(['#'] * 11, 11, 1).splitlines()
    assert lines[3] == ' 0| #'
    assert lines[-1] == '10| #'


def test_missing_grid():
    assert format_board(None, 3, 3) == NOT_GENERATED


def test_print_board_true_layer_before_and_after_generation(layout):
    game = Minesweeper(2, 2, 0)
    out = io.StringIO()
    print_board(game, out, Layer.TRUE)
    assert out.getvalue() == NOT_GENERATED + '\n'

    game = layout([
        '*.',
        '..',
    ])
    out = io.StringIO()
    print_board(game, out, Layer.TRUE)
    assert out.getvalue().splitlines()[-2:] == [' 0| *1', ' 1| 11']


def test_render_ascii(layout):
    game = layout([
        '*..',
        '...',
    ])
    game.flag(0, 0)
    game.dig(0, 2)
    assert render_ascii(game) == 'F 1  \n# 1  '
    assert render_ascii(game, Layer.TRUE) == '* 1  \n1 1  '
