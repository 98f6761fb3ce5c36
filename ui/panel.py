"""HUD strip under the grid: selected material, tick count, pause state, per-material counts.
Also owns the keyboard/mouse-wheel controls that don't paint cells."""

import pygame
from typing import Callable

from ui.colors import MATERIAL_COLORS
from world.grid import Grid
from world.materials import PALETTE, Material, MaterialKind, cycle_material

FONT_SIZE = 20
SMALL_FONT_SIZE = 16
LABEL_COLOR = (200, 200, 200)
DIM_COLOR = (120, 120, 120)
SWATCH_PX = 14
MAX_BRUSH_RADIUS = 5

# Number keys 1..5 pick PALETTE entries directly.
_NUMBER_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5)


class HudPanel:
    """State: params dict; draw and handle events. Clear and Step callbacks."""

    def __init__(
        self,
        rect: pygame.Rect,
        initial: dict,
        on_clear: Callable[[], None],
        on_step: Callable[[], None],
    ) -> None:
        self.rect = rect
        self.params = {
            "selected": initial.get("selected", PALETTE[2]),
            "brush_radius": max(0, min(MAX_BRUSH_RADIUS, initial.get("brush_radius", 0))),
            "paused": initial.get("paused", False),
        }
        self.on_clear = on_clear
        self.on_step = on_step
        self._font = None
        self._small_font = None

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _ensure_small_font(self) -> pygame.font.Font:
        if self._small_font is None:
            self._small_font = pygame.font.Font(None, SMALL_FONT_SIZE)
        return self._small_font

    @property
    def selected(self) -> Material:
        return self.params["selected"]

    @property
    def paused(self) -> bool:
        return self.params["paused"]

    def get_params(self) -> dict:
        return self.params.copy()

    def draw(self, surface: pygame.Surface, grid: Grid, tick_count: int = 0) -> None:
        font = self._ensure_font()
        small = self._ensure_small_font()
        x, y = self.rect.x + 8, self.rect.y + 6

        selected = self.params["selected"]
        status = "paused" if self.params["paused"] else "running"
        label = font.render(
            f"{selected.name.capitalize()}  brush {self.params['brush_radius']}  tick {tick_count}  ({status})",
            True,
            LABEL_COLOR,
        )
        surface.blit(label, (x, y))
        y += label.get_height() + 6

        for i, m in enumerate(PALETTE):
            color = MATERIAL_COLORS.get(m.kind)
            if color is not None:
                pygame.draw.rect(surface, color, (x, y, SWATCH_PX, SWATCH_PX))
            else:
                pygame.draw.rect(surface, DIM_COLOR, (x, y, SWATCH_PX, SWATCH_PX), 1)
            if m.kind == selected.kind:
                pygame.draw.rect(surface, LABEL_COLOR, (x - 2, y - 2, SWATCH_PX + 4, SWATCH_PX + 4), 1)
            text = f"{i + 1} {m.name}"
            if m.kind != MaterialKind.AIR:
                text += f" {grid.count(m.kind)}"
            t = small.render(text, True, LABEL_COLOR)
            surface.blit(t, (x + SWATCH_PX + 4, y))
            x += SWATCH_PX + 4 + t.get_width() + 12

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed."""
        if event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                self.params["selected"] = cycle_material(self.params["selected"], 1)
            elif event.y < 0:
                self.params["selected"] = cycle_material(self.params["selected"], -1)
            return event.y != 0
        if event.type == pygame.KEYDOWN:
            if event.key in _NUMBER_KEYS:
                self.params["selected"] = PALETTE[_NUMBER_KEYS.index(event.key)]
                return True
            if event.key == pygame.K_SPACE:
                self.params["paused"] = not self.params["paused"]
                return True
            if event.key == pygame.K_c:
                self.on_clear()
                return True
            if event.key == pygame.K_n and self.params["paused"]:
                self.on_step()
                return True
            if event.key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
                self.params["brush_radius"] = min(MAX_BRUSH_RADIUS, self.params["brush_radius"] + 1)
                return True
            if event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self.params["brush_radius"] = max(0, self.params["brush_radius"] - 1)
                return True
        return False
