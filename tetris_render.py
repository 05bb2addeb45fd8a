"""
Rendering helpers for the Tetris project.

- The board canvas is its own Surface, exactly COLS*BLOCK_SIZE x ROWS*BLOCK_SIZE.
- Every filled cell is a BLOCK_SIZE square in its stored color with a 1px
  border in the theme's border color.
- Everything is drawn from an engine Snapshot; the live board is never read.
- HUD text surfaces are cached and re-rendered only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_config import CONFIG, THEMES, COLS, ROWS
from tetris_layout import Dims
from tetris_engine import Snapshot
from tetris_piece import Piece

# the default pygame font has no arrow glyphs
CONTROLS = ("Left/Right : Move", "Up : Rotate", "Down : Soft Drop", "Space : Hard Drop", "P : Pause")

def theme() -> Dict[str, tuple]:
    return THEMES[CONFIG["THEME"]]

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_kind: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Board canvas plus cached panel text for fast blitting."""
    def __init__(self, dims: Dims, font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.hud = HudCache()
        self.board_surface = pygame.Surface((COLS * dims.cell, ROWS * dims.cell))
        self.pv_cell = max(12, int(dims.cell * 0.6))
        self.pv_x = dims.panel_x + 12
        self.pv_y = dims.panel_y + 150

    # ---------- cells ----------
    def draw_block(self, surface: pygame.Surface, x: float, y: float, color: str, size: Optional[int] = None):
        c = size or self.dims.cell
        rect = pygame.Rect(int(x * c), int(y * c), c, c)
        surface.fill(pygame.Color(color), rect)
        pygame.draw.rect(surface, theme()["border"], rect, 1)

    # ---------- board canvas ----------
    def draw_board(self, snapshot: Snapshot) -> pygame.Surface:
        """Redraws the canvas from scratch: settled cells plus the falling piece."""
        self.board_surface.fill(theme()["board"])
        grid = snapshot.composite()
        for y in range(ROWS):
            for x in range(COLS):
                if grid[y][x] is not None:
                    self.draw_block(self.board_surface, x, y, grid[y][x])
        return self.board_surface

    def blit_board(self, screen: pygame.Surface, snapshot: Snapshot):
        d = self.dims
        screen.blit(self.draw_board(snapshot), (d.board_x, d.board_y))
        frame = pygame.Rect(d.board_x - 1, d.board_y - 1, d.board_w + 2, d.board_h + 2)
        pygame.draw.rect(screen, theme()["border"], frame, 1)

    # ---------- next preview ----------
    def render_preview(self, piece: Piece) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell * 4, self.pv_cell * 4), pygame.SRCALPHA)
        offx = (4 - piece.width) / 2
        offy = (4 - piece.height) / 2
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    self.draw_block(s, c + offx, r + offy, piece.color, self.pv_cell)
        return s

    # ---------- HUD / Panel ----------
    def draw_panel(self, screen: pygame.Surface, snapshot: Snapshot):
        d = self.dims
        f = self.font
        t = theme()
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, t["text"])
        if snapshot.score != self.hud.score:
            self.hud.score = snapshot.score
            self.hud.score_s = f.render(f"Score: {snapshot.score}", True, t["text"])
        if snapshot.level != self.hud.level:
            self.hud.level = snapshot.level
            self.hud.level_s = f.render(f"Level: {snapshot.level}", True, t["text"])
        if snapshot.lines != self.hud.lines:
            self.hud.lines = snapshot.lines
            self.hud.lines_s = f.render(f"Lines: {snapshot.lines}", True, t["text"])
        next_kind = snapshot.next.kind if snapshot.next else ""
        if next_kind != self.hud.next_kind:
            self.hud.next_kind = next_kind
            self.hud.next_preview = self.render_preview(snapshot.next) if snapshot.next else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        if self.hud.next_preview:
            screen.blit(f.render("Next Piece:", True, t["muted"]), (d.panel_x + 12, d.panel_y + 126))
            screen.blit(self.hud.next_preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [f.render("Controls:", True, t["muted"])] + [
                f.render(s, True, t["muted"]) for s in CONTROLS
            ]
        y = d.panel_y + 150 + self.pv_cell * 4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
