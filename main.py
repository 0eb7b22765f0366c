import argparse
import logging
import sys

import pygame
from mathtris_config import CONFIG
from mathtris_input import AnswerBuffer, handle_key
from mathtris_layout import compute_dims
from mathtris_overlay import Overlay
from mathtris_render import RenderAssets
from mathtris_session import GameSession

log = logging.getLogger("mathtris")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Tetris with an arithmetic quiz between pieces")
    ap.add_argument("--seed", type=int, default=None, help="seed for pieces, garbage gaps and problems")
    ap.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    ap.add_argument("--log-level", default="WARNING")
    return ap.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    CONFIG["CELL_SIZE"] = args.cell_size

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    pygame.key.set_repeat(170, 50)

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Math Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 40)

    render = RenderAssets(dims, font)
    overlay = Overlay(dims, font, big_font)
    clock = pygame.time.Clock()

    session = GameSession({"SEED": args.seed})
    answer = AnswerBuffer()
    log.info("started with seed=%s", args.seed)

    step = CONFIG["TICK_MS"]
    acc = 0
    while True:
        acc += clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                handle_key(session, answer, e)

        # fixed logical step regardless of frame time
        while acc >= step:
            acc -= step
            session.tick(step)

        answer.sync(session.get_phase())
        render.draw_board(screen, session)
        render.draw_panel_hud(screen, session.get_hud(), session.get_next_piece_snapshot())
        overlay.draw(screen, session, answer.text)
        pygame.display.flip()


if __name__ == '__main__':
    main()
