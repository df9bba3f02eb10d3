
"""
Rendering helpers for webtris.

- Pre-render one cell Surface per colour tag and blit it.
- Pre-render the static background (grid lines + panel frame + buttons).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from webtris_board import COLS, ROWS
from webtris_layout import Dims
from webtris_piece import Piece
from webtris_session import Snapshot

# Colour per cell tag (see webtris_piece.SHAPES)
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,0,0),      # T red
    2: (255,255,0),    # O yellow
    3: (255,0,255),    # L magenta
    4: (0,0,255),      # J blue
    5: (0,255,255),    # I cyan
    6: (0,128,0),      # S green
    7: (255,165,0),    # Z orange
}
GRID_COLOR = (0x59,0x59,0x59)
CELL_BORDER = (0xc6,0xc6,0xc6)
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    high: int = -1
    seconds: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    time_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel + buttons) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0,0,0))
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        for name, rect in d.buttons.items():
            pygame.draw.rect(self.bg, (40,50,90), rect)
            pygame.draw.rect(self.bg, (90,100,150), rect, 1)
            label = self.font.render(name.capitalize(), True, TEXT)
            self.bg.blit(label, label.get_rect(center=rect.center))

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, CELL_BORDER, (0,0,c,c), 1)
            self.cell_surf[tag] = s

    def draw_cell(self, screen: pygame.Surface, tag: int, col: int, row: int):
        if tag not in self.cell_surf or not (0 <= col < COLS and 0 <= row < ROWS):
            return
        rx = self.dims.board_x + col*self.dims.cell
        ry = self.dims.board_y + row*self.dims.cell
        screen.blit(self.cell_surf[tag], (rx, ry))

    def draw_grid(self, screen: pygame.Surface, grid: List[List[int]]):
        for y, row in enumerate(grid):
            for x, v in enumerate(row):
                if v:
                    self.draw_cell(screen, v, x, y)

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    self.draw_cell(screen, v, piece.x + c, piece.y + r)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, high: int, seconds: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Webtris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if high != self.hud.high:
            self.hud.high = high
            self.hud.high_s = f.render(f"High: {high}", True, TEXT)
        if seconds != self.hud.seconds:
            self.hud.seconds = seconds
            self.hud.time_s = f.render(f"Time: {seconds}s", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.high_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.time_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Enter Start", True, (165,175,215)),
                f.render("P Pause • R Reset", True, (165,175,215)),
            ]
        y = d.buttons["reset"].bottom + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Whole frame ----------
    def draw_frame(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        self.draw_grid(screen, snap.grid)
        self.draw_piece(screen, snap.piece)
        self.draw_panel_hud(screen, snap.score, snap.high_score, snap.elapsed_seconds)
