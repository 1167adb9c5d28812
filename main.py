import logging
import sys
import pygame
from tetris_config import CONFIG, apply_env_overrides
from tetris_input import Key, PygameKeys
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRoller
from tetris_session import GameSession
from tetris_text import FrameBuffer, FrameOverflowError, BLOCK, compose_frame, compose_splash

logger = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def quit_game(code=0):
    pygame.quit(); sys.exit(code)


def run(screen, render, keys, frame):
    compose_splash(frame)
    render.draw(screen, frame)
    pygame.display.flip()
    if keys.read_key() in (Key.QUIT, Key.CLOSE):
        quit_game()

    clock = pygame.time.Clock()
    session = GameSession(PieceRoller(CONFIG["SEED"]))
    logger.debug(f"Session started, seed={CONFIG['SEED']}")

    while True:
        if session.running:
            key = keys.poll_key()
        else:
            key = keys.read_key()
            # closing the window always exits, even at the prompt; Esc does not
            if key is Key.CLOSE:
                quit_game()
        if not session.handle_input(key):
            quit_game()

        session.advance(pygame.time.get_ticks())

        if session.dirty:
            compose_frame(frame, session.get_snapshot())
            render.draw(screen, frame)
            pygame.display.flip()

        clock.tick(CONFIG["TICK_HZ"])


def main():
    apply_env_overrides(CONFIG)
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    font = pygame.font.SysFont(CONFIG["FONT_NAME"], CONFIG["FONT_SIZE"])
    dims = compute_dims(*font.size(BLOCK))
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris in console")

    render = RenderAssets(dims, font)
    frame = FrameBuffer()
    keys = PygameKeys()

    try:
        run(screen, render, keys, frame)
    except FrameOverflowError as e:
        logger.error(f"Frame staging failed: {e}")
        print(f"Error: {e}.", file=sys.stderr)
        quit_game(1)


if __name__ == '__main__':
    main()
