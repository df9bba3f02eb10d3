
import logging
import sys

import pygame
from webtris_config import CONFIG
from webtris_input import translate, dispatch
from webtris_layout import compute_dims
from webtris_overlay import Overlay
from webtris_render import RenderAssets
from webtris_session import Session
from webtris_store import HighScoreStore

log = logging.getLogger("webtris")


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, str(CONFIG["LOG_LEVEL"]).upper(), logging.INFO),
        format="%(asctime)s  %(levelname)s  %(message)s",
    )


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging()
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Webtris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(dims, font, big_font)
    clock = pygame.time.Clock()

    session = Session(store=HighScoreStore(CONFIG["HIGH_SCORE_PATH"]))
    log.info("high score %d loaded", session.high_score)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            cmd = translate(e, dims)
            if cmd is not None:
                dispatch(session, cmd)

        session.advance(dt)

        snap = session.snapshot()
        render.draw_frame(screen, snap)
        overlay.draw(screen, snap)
        pygame.display.flip()


if __name__ == '__main__':
    main()
