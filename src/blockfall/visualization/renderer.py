from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from blockfall.game import FallingBlockGame, Piece
from .palette import color_for_value


class Renderer:
    """Draws a `FallingBlockGame` using only its read-only accessors."""

    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, game: FallingBlockGame) -> tuple[int, int]:
        board_w = game.grid.width * self.cell_size
        board_h = game.grid.height * self.cell_size
        panel_w = self.panel_cells * self.cell_size
        return self.margin * 3 + board_w + panel_w, self.margin * 2 + board_h

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        width = w * self.cell_size
        height = h * self.cell_size
        surf = pygame.Surface((width, height))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                color = color_for_value(v)
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _preview_surface(self, piece: Optional[Piece]) -> pygame.Surface:
        size = 4 * self.cell_size
        surf = pygame.Surface((size, size))
        surf.fill((30, 30, 36))
        if piece is None:
            return surf
        off_x = (size - piece.width * self.cell_size) // 2
        off_y = (size - piece.height * self.cell_size) // 2
        for dy in range(piece.height):
            for dx in range(piece.width):
                if piece.shape[dy, dx]:
                    rect = pygame.Rect(
                        off_x + dx * self.cell_size,
                        off_y + dy * self.cell_size,
                        self.cell_size - 1,
                        self.cell_size - 1,
                    )
                    pygame.draw.rect(surf, color_for_value(piece.color), rect)
        return surf

    def _text(self, screen: pygame.Surface, message: str, pos: tuple[int, int]) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        screen.blit(self._font.render(message, True, (230, 230, 230)), pos)

    def render_frame(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game.get_state()), (self.margin, self.margin))

        panel_x = self.margin * 2 + game.grid.width * self.cell_size
        self._text(screen, "Next", (panel_x, self.margin))
        screen.blit(self._preview_surface(game.next_piece), (panel_x, self.margin + 24))

        snap = game.snapshot()
        y = self.margin + 24 + 4 * self.cell_size + self.margin
        for label, value in (("Score", snap.score), ("Level", snap.level), ("Lines", snap.lines)):
            self._text(screen, f"{label}: {value}", (panel_x, y))
            y += 28

        if snap.paused:
            self._text(screen, "Paused - P to resume", (panel_x, y + 20))
        elif snap.game_over:
            self._text(screen, f"Game Over ({snap.score})", (panel_x, y + 20))
            self._text(screen, "R to restart", (panel_x, y + 48))
        elif not snap.running:
            self._text(screen, "Enter to start", (panel_x, y + 20))

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        self.render_frame(screen, game)
        pygame.display.flip()
