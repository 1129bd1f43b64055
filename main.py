import logging
import random
import sys
import pygame
from blockfall_config import CONFIG
from blockfall_game import Game
from blockfall_input import dispatch
from blockfall_layout import compute_dims
from blockfall_overlay import Overlay
from blockfall_render import RenderAssets
from blockfall_timer import TICK_EVENT

logger = logging.getLogger("blockfall")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def wait_for_ack():
    """Blocks like a modal alert until a key press or click."""
    while True:
        ev = pygame.event.wait()
        if ev.type == pygame.QUIT: pygame.quit(); sys.exit()
        if ev.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN): return


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 40)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    overlay = Overlay()

    game = Game(rng=random.Random(CONFIG["SEED"]))
    need_redraw = True
    final_score = None

    def on_change(_state):
        nonlocal need_redraw
        need_redraw = True

    def on_over(score):
        nonlocal final_score
        final_score = score

    game.subscribe(on_change)
    game.on_game_over(on_over)
    game.start()

    def refresh_assets_if_cell_changed():
        nonlocal dims, screen, render, need_redraw
        new_dims = compute_dims()
        if new_dims.cell != dims.cell:
            dims = new_dims
            screen = recreate_window(dims)
            render = RenderAssets(dims, font, big_font)
            need_redraw = True

    while True:
        clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.stop(); pygame.quit(); sys.exit()
            if e.type == TICK_EVENT:
                if not overlay.active: game.tick()
                continue
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1:
                    overlay.toggle(); need_redraw = True; continue
                if overlay.active:
                    changed = overlay.handle(e)
                    if changed == "TICK_MS": game.restart_timer()
                    if changed == "CELL_SIZE": refresh_assets_if_cell_changed()
                    need_redraw = True
                    continue
                if e.key == pygame.K_ESCAPE:
                    game.stop(); pygame.quit(); sys.exit()
                if e.key == pygame.K_r:
                    game.reset(); continue
            if overlay.active: continue
            dispatch(game, e, dims)

        if final_score is not None:
            render.draw(screen, game.state)
            pygame.display.flip()
            score, final_score = final_score, None
            if CONFIG["AUTO_RESET"]:
                wait_for_ack()
                logger.info("auto reset after final score %d", score)
                game.reset()
            need_redraw = False
            continue

        if need_redraw:
            render.draw(screen, game.state)
            overlay.draw(screen, font, dims.total_w, dims.total_h)
            pygame.display.flip()
            need_redraw = False


if __name__ == '__main__':
    main()
