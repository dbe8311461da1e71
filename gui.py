from __future__ import annotations
import tkinter as tk
from tkinter import ttk, messagebox

from gridsweep.engine import Minesweeper
from gridsweep.errors import GridsweepError, OutOfBounds
from gridsweep.grid import Layer, Outcome
from gridsweep.session import board_cleared


CELL_SIZE = 28
PADDING = 10
COLOR_MAP = {
    '1': '#1976d2',
    '2': '#388e3c',
    '3': '#d32f2f',
    '4': '#7b1fa2',
    '5': '#5d4037',
    '6': '#0097a7',
    '7': '#455a64',
    '8': '#9e9e9e',
}


class MinesweeperGUI:
    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title('Gridsweep')

        # Controls
        control_frame = ttk.Frame(root)
        control_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)

        ttk.Label(control_frame, text='Rows').grid(row=0, column=0, sticky='w')
        self.rows_var = tk.IntVar(value=10)
        ttk.Entry(control_frame, textvariable=self.rows_var, width=4).grid(row=0, column=1)

        ttk.Label(control_frame, text='Columns').grid(row=0, column=2, sticky='w')
        self.columns_var = tk.IntVar(value=10)
        ttk.Entry(control_frame, textvariable=self.columns_var, width=4).grid(row=0, column=3)

        ttk.Label(control_frame, text='Mines').grid(row=0, column=4, sticky='w')
        self.mines_var = tk.IntVar(value=20)
        ttk.Entry(control_frame, textvariable=self.mines_var, width=5).grid(row=0, column=5)

        self.btn_new = ttk.Button(control_frame, text='New Game', command=self.new_game)
        self.btn_new.grid(row=0, column=6, padx=8)

        # Status
        stats_frame = ttk.Frame(root)
        stats_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=2)
        self.label_status = ttk.Label(stats_frame, text='')
        self.label_status.pack(side=tk.LEFT)

        # Canvas for board
        self.canvas = tk.Canvas(root, bg='#eeeeee')
        self.canvas.pack(side=tk.TOP, padx=PADDING, pady=PADDING)
        self.canvas.bind('<Button-1>', self.on_dig)
        self.canvas.bind('<Button-3>', self.on_flag)

        self.game: Minesweeper | None = None
        self.finished = False
        self.new_game()

    def new_game(self):
        try:
            self.game = Minesweeper(int(self.rows_var.get()), int(self.columns_var.get()), int(self.mines_var.get()))
        except (GridsweepError, tk.TclError) as e:
            messagebox.showerror('Error', str(e))
            return
        self.finished = False
        self._resize_canvas()
        self._render()
        self._set_status('Left click digs, right click flags')

    def _resize_canvas(self):
        assert self.game is not None
        w = self.game.columns * CELL_SIZE + PADDING * 2
        h = self.game.rows * CELL_SIZE + PADDING * 2
        self.canvas.config(width=w, height=h)

    def _cell_at(self, event):
        return (event.y - PADDING) // CELL_SIZE, (event.x - PADDING) // CELL_SIZE

    def on_dig(self, event):
        if self.game is None or self.finished:
            return
        row, col = self._cell_at(event)
        try:
            outcome = self.game.dig(row, col)
        except OutOfBounds:
            return
        except GridsweepError as e:
            messagebox.showerror('Error', str(e))
            return
        if outcome is Outcome.LOSS:
            self.finished = True
            self._render(Layer.TRUE)
            self._set_status('BOOM - you lose')
        elif board_cleared(self.game):
            self.finished = True
            self._render()
            self._set_status('Board cleared - you win')
        else:
            self._render()

    def on_flag(self, event):
        if self.game is None or self.finished:
            return
        row, col = self._cell_at(event)
        try:
            self.game.flag(row, col)
        except OutOfBounds:
            return
        self._render()

    def _set_status(self, text: str):
        self.label_status.config(text=text)

    def _render(self, which: Layer = Layer.VISIBLE):
        assert self.game is not None
        self.canvas.delete('all')
        codes = self.game.codes(which)
        if codes is None:
            codes = self.game.codes(Layer.VISIBLE)
        visible = self.game.codes(Layer.VISIBLE)
        for r in range(self.game.rows):
            for c in range(self.game.columns):
                px = PADDING + c * CELL_SIZE
                py = PADDING + r * CELL_SIZE
                i = self.game.index(r, c)
                code = codes[i]
                if visible[i] == 'F':
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#ffc107', outline='#999')
                    self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text='🚩', font=('Arial', 12))
                elif code == '#':
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#bdbdbd', outline='#9e9e9e')
                elif code == '*':
                    fill = '#ef5350' if visible[i] == '*' else '#bdbdbd'
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill=fill, outline='#999')
                    self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text='💣', font=('Arial', 12))
                else:
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#eeeeee', outline='#ccc')
                    if code != ' ':
                        color = COLOR_MAP.get(code, '#212121')
                        self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text=code, fill=color, font=('Helvetica', 12, 'bold'))


def main():
    root = tk.Tk()
    app = MinesweeperGUI(root)
    root.mainloop()


if __name__ == '__main__':
    main()
