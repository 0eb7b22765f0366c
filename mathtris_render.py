
"""
Rendering helpers for the board and side panel.

- Pre-render one cell Surface per color id (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all locked cells; rebuild it only when the snapshot changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from mathtris_layout import Dims
from mathtris_config import COLS, ROWS
from mathtris_session import GameSession, Hud, PieceSnapshot, Phase

# Colors per cell value (1..7 piece colors, 8 garbage)
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,107,107),
    2: (78,205,196),
    3: (69,183,209),
    4: (255,160,122),
    5: (152,216,200),
    6: (247,220,111),
    7: (187,143,206),
    8: (102,102,102),
}

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    hud: Optional[Hud] = None
    next_kind: str = ""
    title: Optional[pygame.Surface] = None
    lines_s: Optional[list] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_snapshot = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((26,26,46))
        grid_col = (40,44,70)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(14, int(d.cell*0.6))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 180
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites (solid with shine + ghost) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for v, col in COLORS.items():
            s = pygame.Surface((c-4, c-4), pygame.SRCALPHA)
            s.fill(col)
            s.fill((255,255,255,50), (0, 0, c-4, c//4), special_flags=pygame.BLEND_RGBA_ADD)
            self.cell_surf[v] = s
            g = pygame.Surface((c-4, c-4), pygame.SRCALPHA)
            g.fill((255,255,255,26))
            self.ghost_surf[v] = g

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board surface cache ----------
    def board_surface_for(self, snapshot) -> pygame.Surface:
        """Locked cells surface; rebuilt only when the snapshot differs."""
        if snapshot != self._board_snapshot:
            self.board_surface.fill((0,0,0,0))
            c = self.dims.cell
            for y, row in enumerate(snapshot):
                for x, v in enumerate(row):
                    if v:
                        self.board_surface.blit(self.cell_surf[v], (x*c + 2, y*c + 2))
            self._board_snapshot = snapshot
        return self.board_surface

    def draw_piece(self, screen: pygame.Surface, p: PieceSnapshot, y: int, ghost: bool = False):
        d = self.dims
        surf = (self.ghost_surf if ghost else self.cell_surf)[p.color]
        for r, row in enumerate(p.shape):
            for c, v in enumerate(row):
                if v and y + r >= 0:
                    screen.blit(surf, (d.board_x + (p.x + c)*d.cell + 2, d.board_y + (y + r)*d.cell + 2))

    def draw_board(self, screen: pygame.Surface, session: GameSession):
        self.redraw_static(screen)
        screen.blit(self.board_surface_for(session.get_board_snapshot()), (self.dims.board_x, self.dims.board_y))
        if session.get_phase() is not Phase.FALLING:
            return
        p = session.get_current_piece_snapshot()
        self.draw_piece(screen, p, session.get_ghost_position(), ghost=True)
        self.draw_piece(screen, p, p.y)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, hud: Hud, next_piece: PieceSnapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Math Tetris", True, (197,202,233))
        if hud != self.hud.hud:
            self.hud.hud = hud
            self.hud.lines_s = [
                f.render(f"Score: {hud.score}", True, TEXT),
                f.render(f"Level: {min(hud.level, 10)}", True, TEXT),
                f.render(f"Lines: {hud.lines}", True, TEXT),
                f.render(f"Streak: {hud.streak}", True, TEXT),
            ]
        if next_piece.kind != self.hud.next_kind:
            self.hud.next_kind = next_piece.kind
            s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
            shape = next_piece.shape
            offx = (4 - len(shape[0])) // 2
            offy = max(0, (4 - len(shape)) // 2)
            for y, row in enumerate(shape):
                for x, v in enumerate(row):
                    if v:
                        block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
                        block.fill(COLORS[next_piece.color])
                        s.blit(block, ((x + offx)*self.pv_cell + 1, (y + offy)*self.pv_cell + 1))
            self.hud.next_label = s
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 44
        for surf in self.hud.lines_s:
            screen.blit(surf, (d.panel_x + 12, y)); y += 24
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 154))
        screen.blit(self.hud.next_label, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rot CW", True, DIM_TEXT),
                f.render("Z Rot CCW", True, DIM_TEXT),
                f.render("Space Hard", True, DIM_TEXT),
                f.render("Enter Answer", True, DIM_TEXT),
                f.render("R Restart", True, DIM_TEXT),
            ]
        y = d.panel_y + 300
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
