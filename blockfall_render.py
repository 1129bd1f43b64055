"""
Rendering helpers for Blockfall.

- Pre-render one swatch Surface per color (fill + 1px gray border) and blit them.
- Pre-render the static background (black window + empty white grid) when Dims change.
- Cache HUD text surfaces; re-render only when the values change.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional
from blockfall_layout import Dims, GAP
from blockfall_shapes import COLS, ROWS, COLORS
from blockfall_input import button_rects, LABELS

BG = (0, 0, 0)
TEXT = (255, 255, 255)
EMPTY = "white"
BORDER = "gray"

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_cells()
        self._make_static()
        self._score = -1
        self._score_s: Optional[pygame.Surface] = None
        self._over_s: Optional[pygame.Surface] = None

    def _swatch(self, color) -> pygame.Surface:
        c = self.dims.cell
        s = pygame.Surface((c, c))
        s.fill(pygame.Color(color))
        pygame.draw.rect(s, pygame.Color(BORDER), (0, 0, c, c), 1)
        return s

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {col: self._swatch(col) for col in COLORS.values()}
        self.empty_surf = self._swatch(EMPTY)

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for y in range(ROWS):
            for x in range(COLS):
                self.bg.blit(self.empty_surf, self.cell_pos(x, y))
        title = self.big_font.render("Tetris", True, TEXT)
        self.bg.blit(title, title.get_rect(center=(d.total_w // 2, 24)))
        for action, rect in button_rects(d):
            pygame.draw.rect(self.bg, (60, 60, 60), rect)
            pygame.draw.rect(self.bg, (200, 200, 200), rect, 1)
            lbl = self.font.render(LABELS[action], True, TEXT)
            self.bg.blit(lbl, lbl.get_rect(center=rect.center))

    def cell_pos(self, bx: int, by: int):
        step = self.dims.cell + GAP
        return (self.dims.board_x + bx*step, self.dims.board_y + by*step)

    def _surf(self, cell) -> pygame.Surface:
        # board cells hold color names; unknown colors get a swatch on demand
        if cell not in self.cell_surf:
            self.cell_surf[cell] = self._swatch(cell)
        return self.cell_surf[cell]

    def draw_hud(self, screen: pygame.Surface, state):
        d = self.dims
        if state.score != self._score:
            self._score = state.score
            self._score_s = self.font.render(f"Score: {state.score}", True, TEXT)
        screen.blit(self._score_s, self._score_s.get_rect(center=(d.total_w // 2, 56)))
        if state.game_over:
            if self._over_s is None:
                self._over_s = self.font.render("Game Over", True, (255, 0, 0))
            screen.blit(self._over_s, self._over_s.get_rect(center=(d.total_w // 2, 84)))

    def draw(self, screen: pygame.Surface, state):
        screen.blit(self.bg, (0, 0))
        for y, row in enumerate(state.grid):
            for x, cell in enumerate(row):
                if cell:
                    screen.blit(self._surf(cell), self.cell_pos(x, y))
        p = state.piece
        for x, y in p.cells():
            if 0 <= y < ROWS:
                screen.blit(self._surf(p.color), self.cell_pos(x, y))
        self.draw_hud(screen, state)
        if state.game_over:
            self.draw_final_score(screen, state.score)

    def draw_final_score(self, screen: pygame.Surface, score: int):
        d = self.dims
        msg = self.font.render(f"Game Over! Final Score: {score}", True, (255, 220, 220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        pygame.draw.rect(screen, BG, rect.inflate(12, 12))
        screen.blit(msg, rect)
