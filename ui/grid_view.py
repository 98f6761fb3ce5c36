"""Grid view: one filled square per non-air cell, thin grey border; pointer to cell mapping."""

import pygame
import numpy as np

from ui.colors import BACKGROUND, grid_to_rgb
from world.grid import Grid
from world.materials import MaterialKind

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1


def _cell_size(rect: pygame.Rect, grid: Grid) -> tuple[int, int]:
    return max(1, rect.width // grid.width), max(1, rect.height // grid.height)


def screen_to_cell(pos: tuple[int, int], rect: pygame.Rect, grid: Grid) -> tuple[int, int] | None:
    """Pointer position -> (x, y) grid cell, or None outside the drawn grid."""
    cell_w, cell_h = _cell_size(rect, grid)
    px, py = pos[0] - rect.x, pos[1] - rect.y
    if px < 0 or py < 0:
        return None
    x, y = px // cell_w, py // cell_h
    if not grid.in_bounds(x, y):
        return None
    return int(x), int(y)


def draw_grid(surface: pygame.Surface, rect: pygame.Rect, grid: Grid) -> None:
    """Draw every non-air cell into rect; cell size from rect dimensions."""
    cell_w, cell_h = _cell_size(rect, grid)
    codes = grid.kind_codes()
    rgb = grid_to_rgb(codes, BACKGROUND)
    surface.fill(BACKGROUND, rect)
    ys, xs = np.nonzero(codes != MaterialKind.AIR)
    for y, x in zip(ys.tolist(), xs.tolist()):
        r, g, b = int(rgb[y, x, 0]), int(rgb[y, x, 1]), int(rgb[y, x, 2])
        pygame.draw.rect(surface, (r, g, b), (rect.x + x * cell_w, rect.y + y * cell_h, cell_w, cell_h))
    pygame.draw.rect(surface, BORDER_COLOR, rect, BORDER_PX)
