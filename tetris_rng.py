"""Seeded piece roller"""
import time
from typing import Optional, Tuple

from tetris_piece import PIECES


class PieceRoller:
    """32-bit LCG producing (shape index, palette color) pairs."""

    COLORS = 7

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_piece(self) -> Tuple[int, int]:
        index = self._rand() % len(PIECES)
        color = 1 + self._rand() % self.COLORS
        return index, color
