# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_text import FRAME_COLS, FRAME_ROWS


@dataclass
class Dims:
    glyph_w: int
    glyph_h: int
    margin: int
    frame_w: int
    frame_h: int
    total_w: int
    total_h: int
    frame_x: int
    frame_y: int


def compute_dims(glyph_w: int, glyph_h: int) -> Dims:
    margin = int(CONFIG["MARGIN"])

    frame_w = FRAME_COLS * glyph_w
    frame_h = FRAME_ROWS * glyph_h

    return Dims(
        glyph_w=glyph_w, glyph_h=glyph_h, margin=margin,
        frame_w=frame_w, frame_h=frame_h,
        total_w=margin + frame_w + margin,
        total_h=margin + frame_h + margin,
        frame_x=margin, frame_y=margin,
    )
