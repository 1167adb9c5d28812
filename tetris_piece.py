"""Piece catalog, active piece model, clockwise rotation with horizontal kicks"""
from dataclasses import dataclass, replace
from typing import Iterator, Tuple

COLS, ROWS = 10, 20

Bits = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Shape:
    bits: Bits

    @property
    def size(self) -> int:
        return len(self.bits)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every occupied cell."""
        for i, row in enumerate(self.bits):
            for j, v in enumerate(row):
                if v:
                    yield i, j


PIECES = ["I", "O", "J", "L", "S", "Z", "T"]

SHAPES = {
    "I": Shape(((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0))),
    "O": Shape(((1,1),(1,1))),
    "J": Shape(((1,0,0),(1,1,1),(0,0,0))),
    "L": Shape(((0,0,1),(1,1,1),(0,0,0))),
    "S": Shape(((0,1,1),(1,1,0),(0,0,0))),
    "Z": Shape(((1,1,0),(0,1,1),(0,0,0))),
    "T": Shape(((0,1,0),(1,1,1),(0,0,0))),
}


def rotate_cw(shape: Shape) -> Shape:
    # transpose, then mirror each row
    return Shape(tuple(tuple(col[::-1]) for col in zip(*shape.bits)))


@dataclass(frozen=True)
class Piece:
    shape: Shape
    x: int
    y: int
    color: int

    @staticmethod
    def spawn(index: int, color: int) -> "Piece":
        shape = SHAPES[PIECES[index]]
        return Piece(shape, COLS // 2 - shape.size // 2, 0, color)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

# rotation

def try_rotate(board, piece: Piece) -> Piece:
    """Rotate clockwise, kicking right then left up to size//2 columns.

    Returns the piece unchanged when no placement fits.
    """
    ns = rotate_cw(piece.shape)
    if not board.collides(ns, piece.x, piece.y):
        return replace(piece, shape=ns)
    for k in range(1, ns.size // 2 + 1):
        for dx in (k, -k):
            if not board.collides(ns, piece.x + dx, piece.y):
                return replace(piece, shape=ns, x=piece.x + dx)
    return piece
