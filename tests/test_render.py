import pygame

from tetris_config import CONFIG, THEMES, COLS, ROWS
from tetris_engine import Phase
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import CONTROLS, RenderAssets


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_layout_canvas_matches_block_grid():
    CONFIG["BLOCK_SIZE"] = 20
    d = compute_dims()
    assert (d.board_w, d.board_h) == (COLS * 20, ROWS * 20)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_h == d.board_h + 2 * d.margin


def test_board_cells_drawn_with_border(make_engine):
    engine = make_engine("O")
    engine.start()
    for _ in range(3):
        engine.tick()   # O now covers rows 1-2, columns 4-5
    render = RenderAssets(compute_dims())
    surface = render.draw_board(engine.snapshot())
    c = CONFIG["BLOCK_SIZE"]
    assert surface.get_size() == (COLS * c, ROWS * c)
    border = THEMES[CONFIG["THEME"]]["border"]
    assert rgb(surface, (4 * c + c // 2, 1 * c + c // 2)) == (255, 255, 0)
    assert rgb(surface, (4 * c, 1 * c)) == border
    assert rgb(surface, (c // 2, c // 2)) == THEMES[CONFIG["THEME"]]["board"]


def test_light_theme_border(make_engine):
    CONFIG["THEME"] = "light"
    engine = make_engine("I")
    engine.start()
    engine.hard_drop()
    surface = RenderAssets(compute_dims()).draw_board(engine.snapshot())
    c = CONFIG["BLOCK_SIZE"]
    assert rgb(surface, (3 * c + 5, (ROWS - 1) * c + 5)) == (0, 255, 255)
    assert rgb(surface, (3 * c, (ROWS - 1) * c)) == THEMES["light"]["border"]


def test_overlay_messages_follow_phase(make_engine):
    overlay = Overlay(None, None)
    engine = make_engine()
    assert overlay.lines_for(engine.snapshot())[1][0] == "Press Enter to start"
    engine.start()
    assert overlay.lines_for(engine.snapshot()) == []
    engine.stop()
    assert overlay.lines_for(engine.snapshot())[0][0] == "Paused"
    engine.session.is_over = True
    engine.session.score = 1200
    snap = engine.snapshot()
    assert snap.phase is Phase.GAME_OVER
    assert ("Score: 1200", False) in overlay.lines_for(snap)


def test_panel_legend_uses_plain_text(make_engine):
    assert all(s.isascii() for s in CONTROLS)
    pygame.font.init()
    engine = make_engine("T", "I")
    engine.start()
    dims = compute_dims()
    render = RenderAssets(dims, pygame.font.SysFont(None, 20))
    screen = pygame.Surface((dims.total_w, dims.total_h))
    render.draw_panel(screen, engine.snapshot())
    assert len(render.hud.controls) == len(CONTROLS) + 1
    assert render.hud.next_kind == "I"
