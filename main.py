import logging
import pygame
from tetris_config import CONFIG, THEMES
from tetris_engine import GameEngine, Phase
from tetris_scheduler import DropScheduler, DROP_EVENT
from tetris_input import command_for, allowed
from tetris_overlay import Overlay
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(engine, screen, render, overlay, dims, clock):
    scheduler = engine.scheduler
    while True:
        # key presses and drop ticks share this one queue
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
            if scheduler.handle(e):
                continue
            if e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                return
            cmd = command_for(e)
            if cmd is None:
                continue
            in_progress = engine.phase in (Phase.RUNNING, Phase.PAUSED)
            if allowed(cmd, in_progress):
                engine.dispatch(cmd)

        snap = engine.snapshot()
        screen.fill(THEMES[CONFIG["THEME"]]["bg"])
        render.blit_board(screen, snap)
        render.draw_panel(screen, snap)
        overlay.draw(screen, dims, snap)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    try:
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, DROP_EVENT])
        dims = compute_dims()
        screen = create_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 24)
        big_font = pygame.font.SysFont(None, 42)

        engine = GameEngine(DropScheduler())
        run(engine, screen, RenderAssets(dims, font), Overlay(font, big_font), dims, pygame.time.Clock())
        log.info("quit")
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
