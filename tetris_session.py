"""Game session: spawn, gravity, locking, line clears, scoring, game over"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_board import Board
from tetris_input import Key
from tetris_piece import Piece, Bits, COLS, try_rotate

logger = logging.getLogger("tetris")

START_INTERVAL_MS = 1000
MIN_INTERVAL_MS = 250
INTERVAL_DECREMENT = 25
LEVEL_SCORE_STEP = 100


class State(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FrameSnapshot:
    grid: Tuple[Tuple[int, ...], ...]
    piece_bits: Bits
    piece_x: int
    piece_y: int
    piece_color: int
    next_index: int
    next_color: int
    score: int
    level: int
    running: bool
    changed: bool


class GameSession:
    def __init__(self, roller):
        self.roller = roller
        self.board = Board()
        self.reset()

    def reset(self):
        self.score = 0
        self.level = 1
        self.interval = START_INTERVAL_MS
        self.board.clear()
        self.next_piece = self.roller.next_piece()
        self.piece: Optional[Piece] = None
        self._last_fall: Optional[int] = None
        self._enter(State.SPAWNING)
        self._spawn()

    @property
    def running(self) -> bool:
        return self.state is not State.GAME_OVER

    def _enter(self, state: State):
        self.state = state
        self.dirty = True

    def _spawn(self):
        index, color = self.next_piece
        self.piece = Piece.spawn(index, color)
        self.next_piece = self.roller.next_piece()
        logger.debug(f"Spawned piece {index} at x={self.piece.x}, next {self.next_piece}")
        self._enter(State.FALLING)

    def _try_move(self, dx: int, dy: int) -> bool:
        p = self.piece
        if self.board.collides(p.shape, p.x + dx, p.y + dy):
            return False
        self.piece = p.moved(dx, dy)
        self.dirty = True
        return True

    def handle_input(self, key: Optional[Key]) -> bool:
        """Apply one logical key. Returns False when the session should end."""
        if key is None:
            return True
        if self.state is State.GAME_OVER:
            if key is Key.YES:
                logger.info("Restarting after game over")
                self.reset()
            elif key is Key.NO:
                return False
            return True
        if key in (Key.QUIT, Key.CLOSE):
            return False
        if self.state is not State.FALLING:
            return True
        if key is Key.LEFT:
            self._try_move(-1, 0)
        elif key is Key.RIGHT:
            self._try_move(1, 0)
        elif key is Key.ROTATE:
            rotated = try_rotate(self.board, self.piece)
            if rotated is not self.piece:
                self.piece = rotated
                self.dirty = True
        elif key is Key.DOWN:
            if not self._try_move(0, 1):
                self._enter(State.LOCKING)
        return True

    def advance(self, now_ms: int):
        """Advance simulation to the monotonic timestamp now_ms."""
        if self.state is State.LOCKING:
            self._lock()
        if self._last_fall is None:
            self._last_fall = now_ms
        if self.state is State.FALLING and now_ms - self._last_fall >= self.interval:
            self._last_fall = now_ms
            if not self._try_move(0, 1):
                self._enter(State.LOCKING)

    def _lock(self):
        self.board.lock(self.piece)
        logger.debug(f"Locked piece at x={self.piece.x}, y={self.piece.y}")
        if self.board.is_spawn_blocked():
            logger.info(f"Game over: score={self.score} level={self.level}")
            self._enter(State.GAME_OVER)
            return
        cleared = self.board.clear_full_rows()
        if cleared:
            logger.debug(f"Cleared {cleared} row(s)")
        for _ in range(cleared):
            self.score += COLS
            if self.score >= self.level * LEVEL_SCORE_STEP:
                self.level += 1
                self.interval = max(MIN_INTERVAL_MS, self.interval - INTERVAL_DECREMENT)
                logger.info(f"Level {self.level}, fall interval {self.interval}ms")
        self._enter(State.SPAWNING)
        self._spawn()

    def get_snapshot(self) -> FrameSnapshot:
        p = self.piece
        index, color = self.next_piece
        snap = FrameSnapshot(
            grid=self.board.rows(),
            piece_bits=p.shape.bits, piece_x=p.x, piece_y=p.y, piece_color=p.color,
            next_index=index, next_color=color,
            score=self.score, level=self.level,
            running=self.running, changed=self.dirty,
        )
        self.dirty = False
        return snap
