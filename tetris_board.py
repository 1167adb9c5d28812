"""Board: collide, lock, sweep"""
from typing import List, Optional, Tuple
from tetris_piece import Piece, Shape, COLS, ROWS

Grid = List[List[int]]


class Board:
    def __init__(self):
        self.grid: Grid = [[0] * COLS for _ in range(ROWS)]
        self.last_lock_y: Optional[int] = None

    def clear(self):
        for row in self.grid:
            row[:] = [0] * COLS
        self.last_lock_y = None

    def collides(self, shape: Shape, x: int, y: int) -> bool:
        """True if any occupied cell is off the sides, below the floor or on a filled cell.

        There is no top bound: pieces never move upward.
        """
        for i, j in shape.cells():
            bx, by = x + j, y + i
            if bx < 0 or bx >= COLS or by >= ROWS:
                return True
            if by >= 0 and self.grid[by][bx]:
                return True
        return False

    def lock(self, piece: Piece):
        for i, j in piece.shape.cells():
            self.grid[piece.y + i][piece.x + j] = piece.color
        self.last_lock_y = piece.y

    def is_spawn_blocked(self) -> bool:
        return self.last_lock_y == 0

    def clear_full_rows(self) -> int:
        """Remove full rows bottom-up and return how many were cleared.

        The scan stops at the first empty row; nothing can sit above a gap.
        """
        c = 0; y = ROWS - 1
        while y >= 0:
            filled = sum(1 for v in self.grid[y] if v)
            if filled == COLS:
                del self.grid[y]
                self.grid.insert(0, [0] * COLS)
                c += 1
            elif filled == 0:
                break
            else:
                y -= 1
        return c

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(r) for r in self.grid)
