"""UI: grid view and HUD panel."""

from ui.grid_view import draw_grid, screen_to_cell
from ui.panel import HudPanel
from ui.colors import material_color, grid_to_rgb

__all__ = ["draw_grid", "screen_to_cell", "HudPanel", "material_color", "grid_to_rgb"]
