"""
Text-mode frame staging.

A FrameBuffer is a fixed grid of (glyph, color) pairs that is allocated once
and rewritten every frame. Writes that do not fit raise FrameOverflowError;
there is no partial frame.

Frame layout (FRAME_ROWS x FRAME_COLS): a double-line box with the board on
the left (two glyphs per cell) and a PANEL_W wide SCORE/LEVEL/NEXT panel on
the right, one frame row per board row plus the top and bottom borders.
"""
from typing import List, Tuple

from tetris_piece import COLS, ROWS, PIECES, SHAPES

PANEL_W = 20
FRAME_COLS = 1 + COLS * 2 + 1 + PANEL_W + 1
FRAME_ROWS = ROWS + 2

BLOCK = "█"
CELL_FILLED = BLOCK * 2
CELL_EMPTY = "  "
PROMPT_COLOR = 7

BANNER = [
    "  _____    _       _    ",
    " |_   _|__| |_ _ _(_)___",
    "   | |/ -_)  _| '_| (_-<",
    "   |_|\\___|\\__|_| |_/__/",
    "",
    "Press any key to continue...",
]

GAME_OVER_LINES = [
    (ROWS // 2 - 1, COLS // 2 - 1, " GAME OVER "),
    (ROWS // 2, 2, " Do you want to "),
    (ROWS // 2 + 1, 2, " play again? y/n "),
]


class FrameOverflowError(RuntimeError):
    pass


class FrameBuffer:
    def __init__(self, rows: int = FRAME_ROWS, cols: int = FRAME_COLS):
        self.rows, self.cols = rows, cols
        self.chars: List[List[str]] = [[" "] * cols for _ in range(rows)]
        self.colors: List[List[int]] = [[0] * cols for _ in range(rows)]

    def reset(self):
        for r in range(self.rows):
            self.chars[r][:] = [" "] * self.cols
            self.colors[r][:] = [0] * self.cols

    def put(self, row: int, col: int, text: str, color: int = 0):
        if not 0 <= row < self.rows or col < 0 or col + len(text) > self.cols:
            raise FrameOverflowError(
                f"No enough space in frame buffer for {len(text)} glyphs at ({row}, {col})")
        chars, colors = self.chars[row], self.colors[row]
        for k, ch in enumerate(text):
            chars[col + k] = ch
            colors[col + k] = color

    def line(self, row: int) -> str:
        return "".join(self.chars[row])

    def runs(self, row: int) -> List[Tuple[int, str, int]]:
        """Split a row into (col, text, color) runs of one color."""
        out = []
        chars, colors = self.chars[row], self.colors[row]
        start = 0
        for c in range(1, self.cols + 1):
            if c == self.cols or colors[c] != colors[start]:
                out.append((start, "".join(chars[start:c]), colors[start]))
                start = c
        return out


def centered(text: str, width: int = PANEL_W) -> str:
    slen = len(text)
    pad = (width - slen) // 2 + slen % 2
    return " " * pad + text + " " * (width - pad - slen)


def _panel(buf: FrameBuffer, row: int, i: int, snap):
    col = 2 + COLS * 2
    if i == 1:
        buf.put(row, col, centered("SCORE:"))
    elif i == 2:
        buf.put(row, col, centered(str(snap.score)))
    elif i == 4:
        buf.put(row, col, centered("LEVEL:"))
    elif i == 5:
        buf.put(row, col, centered(str(snap.level)))
    elif i == 10:
        buf.put(row, col, centered("NEXT:"))
    else:
        shape = SHAPES[PIECES[snap.next_index]]
        if 12 <= i < 12 + shape.size:
            pad = PANEL_W // 2 - shape.size
            buf.put(row, col + pad, "".join(
                CELL_FILLED if v else CELL_EMPTY for v in shape.bits[i - 12]), snap.next_color)


def compose_frame(buf: FrameBuffer, snap):
    """Encode a FrameSnapshot into buf."""
    buf.reset()
    bar = "═" * (COLS * 2)
    side = "═" * PANEL_W
    buf.put(0, 0, "╔" + bar + "╦" + side + "╗")
    size = len(snap.piece_bits)
    for i in range(ROWS):
        r = i + 1
        buf.put(r, 0, "║")
        for j in range(COLS):
            color = snap.grid[i][j]
            pi, pj = i - snap.piece_y, j - snap.piece_x
            if 0 <= pi < size and 0 <= pj < size and snap.piece_bits[pi][pj]:
                color = snap.piece_color
            if color:
                buf.put(r, 1 + j * 2, CELL_FILLED, color)
        buf.put(r, 1 + COLS * 2, "║")
        _panel(buf, r, i, snap)
        buf.put(r, FRAME_COLS - 1, "║")
    buf.put(FRAME_ROWS - 1, 0, "╚" + bar + "╩" + side + "╝")
    if not snap.running:
        for row, col, text in GAME_OVER_LINES:
            buf.put(row, col, text, PROMPT_COLOR)


def compose_splash(buf: FrameBuffer):
    buf.reset()
    for r, text in enumerate(BANNER):
        buf.put(r + 1, 2, text)
