"""
Pygame renderer for the text-mode frame.

Paints a FrameBuffer as a character terminal would:
- Static background pre-rendered once per Dims.
- Text runs rendered through the font, kept in a bounded LRU keyed by (text, color).
- Block glyph runs drawn as filled cells so missing font glyphs don't matter.
"""
from __future__ import annotations
from functools import lru_cache
from itertools import groupby
import pygame
from typing import Dict, Tuple
from tetris_layout import Dims
from tetris_text import FrameBuffer, BLOCK

# Palette index -> RGB; ANSI bright colors 91..97
COLORS: Dict[int, Tuple[int,int,int]] = {
    0: (200,210,240),
    1: (255,102,119),
    2: (94,224,142),
    3: (255,224,102),
    4: (106,119,255),
    5: (200,119,255),
    6: (102,224,255),
    7: (255,255,255),
}
BACKGROUND = (10,13,34)
TEXT_CACHE_SIZE = 256


class RenderAssets:
    """Holds the background and an LRU of glyph-run surfaces."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._text = lru_cache(maxsize=TEXT_CACHE_SIZE)(self._render_text)
        self._make_static()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BACKGROUND)

    def _render_text(self, text: str, color: int) -> pygame.Surface:
        return self.font.render(text, True, COLORS.get(color, COLORS[0]))

    def draw(self, screen: pygame.Surface, frame: FrameBuffer):
        d = self.dims
        screen.blit(self.bg, (0,0))
        for row in range(frame.rows):
            y = d.frame_y + row * d.glyph_h
            for col, text, color in frame.runs(row):
                for is_block, chunk in groupby(text, key=lambda ch: ch == BLOCK):
                    chunk = "".join(chunk)
                    x = d.frame_x + col * d.glyph_w
                    col += len(chunk)
                    if is_block:
                        rect = pygame.Rect(x, y + 1, len(chunk) * d.glyph_w, d.glyph_h - 2)
                        pygame.draw.rect(screen, COLORS.get(color, COLORS[0]), rect)
                    elif chunk.strip():
                        screen.blit(self._text(chunk, color), (x, y))
