"""Keyboard source: raw pygame keys to logical keys, polling and blocking reads"""
from collections import deque
from enum import Enum
from typing import Deque, Optional
import pygame


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"
    QUIT = "quit"
    CLOSE = "close"
    YES = "yes"
    NO = "no"
    OTHER = "other"


KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.ROTATE,
    pygame.K_ESCAPE: Key.QUIT,
    pygame.K_y: Key.YES,
    pygame.K_n: Key.NO,
}


def map_key(e) -> Optional[Key]:
    if e.type == pygame.QUIT:
        return Key.CLOSE
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key, Key.OTHER)
    return None


class PygameKeys:
    """One logical key per poll; extra presses wait in a FIFO."""

    def __init__(self):
        self.pending: Deque[Key] = deque()

    def _pump(self):
        for e in pygame.event.get():
            k = map_key(e)
            if k is not None:
                self.pending.append(k)

    def poll_key(self) -> Optional[Key]:
        self._pump()
        return self.pending.popleft() if self.pending else None

    def read_key(self) -> Key:
        while not self.pending:
            k = map_key(pygame.event.wait())
            if k is not None:
                self.pending.append(k)
        return self.pending.popleft()
