from __future__ import annotations

from typing import Tuple

import pygame

from tetromino_game.game import TetrisManager


BACKGROUND: Tuple[int, int, int] = (10, 10, 14)
BOARD: Tuple[int, int, int] = (30, 30, 36)


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, game: TetrisManager) -> Tuple[int, int]:
        return (
            game.num_columns() * self.cell_size + self.margin * 2,
            game.num_rows() * self.cell_size + self.margin * 2,
        )

    def _grid_surface(self, game: TetrisManager) -> pygame.Surface:
        cols = game.num_columns()
        rows = game.num_rows()
        surf = pygame.Surface((cols * self.cell_size, rows * self.cell_size))
        surf.fill(BOARD)
        for (fx, fy), color in game.elems():
            # elems() is in the unit square; map back to cells
            x = int(round(fx * cols))
            y = int(round(fy * rows))
            if not (0 <= x < cols and 0 <= y < rows):
                continue
            rect = pygame.Rect(
                x * self.cell_size,
                y * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            )
            pygame.draw.rect(surf, color.rgb255, rect)
        return surf

    def draw(self, screen: pygame.Surface, game: TetrisManager) -> None:
        grid_surf = self._grid_surface(game)
        screen.fill(BACKGROUND)
        screen.blit(grid_surf, (self.margin, self.margin))
        pygame.display.flip()
