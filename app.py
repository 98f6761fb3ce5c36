"""
App shell: display and main loop. The world ticks on a fixed interval from elapsed time
(independent of frame rate). World, UI, and config are wired here.
"""

import argparse
import logging

import pygame

from world import Grid, tick, AIR
from world.seed_util import make_rng
from ui.grid_view import draw_grid, screen_to_cell
from ui.panel import HudPanel
import config

logger = logging.getLogger(__name__)

TITLE = "Falling Sand"
FPS = 60
HUD_HEIGHT = 56
BACKGROUND = (0, 0, 0)
MAX_TICKS_PER_FRAME = 4


def run(
    config_path: str | None = None,
    width: int | None = None,
    height: int | None = None,
    seed: int | None = None,
) -> None:
    cfg = config.load_config(config_path)
    logging.basicConfig(
        level=getattr(logging, str(cfg["log_level"]).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    nx = width or cfg["world"]["width"]
    ny = height or cfg["world"]["height"]
    cell = max(1, int(cfg["cell_size"]))
    interval_ms = max(1, int(cfg["tick_interval_ms"]))
    rng, seed_used = make_rng(cfg["seed"] if seed is None else seed)
    logger.info("world %dx%d, tick every %d ms, seed %d", nx, ny, interval_ms, seed_used)

    grid = Grid(nx, ny)
    total_ticks = 0

    pygame.init()
    screen = pygame.display.set_mode((nx * cell, ny * cell + HUD_HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    grid_rect = pygame.Rect(0, 0, nx * cell, ny * cell)
    hud_rect = pygame.Rect(0, ny * cell, nx * cell, HUD_HEIGHT)

    def do_clear() -> None:
        grid.clear()
        logger.info("cleared world at tick %d", total_ticks)

    def do_step() -> None:
        nonlocal total_ticks
        tick(grid, rng)
        total_ticks += 1

    panel = HudPanel(
        hud_rect,
        {
            "selected": config.material_from_name(cfg["initial_material"]),
            "brush_radius": int(cfg["brush_radius"]),
        },
        on_clear=do_clear,
        on_step=do_step,
    )

    tick_accum_ms = 0.0
    running = True

    while running:
        dt_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            panel.handle_event(event)

        left, _, right = pygame.mouse.get_pressed()
        if left or right:
            target = screen_to_cell(pygame.mouse.get_pos(), grid_rect, grid)
            if target is not None:
                r = panel.params["brush_radius"]
                x, y = target
                grid.fill_rect(x - r, y - r, x + r, y + r, panel.selected if left else AIR)

        if not panel.paused:
            tick_accum_ms += dt_ms
            # Cap ticks per frame so a stalled frame never freezes the loop
            num_ticks = min(int(tick_accum_ms // interval_ms), MAX_TICKS_PER_FRAME)
            tick_accum_ms = min(tick_accum_ms - num_ticks * interval_ms, MAX_TICKS_PER_FRAME * interval_ms)
            for _ in range(num_ticks):
                do_step()
        else:
            tick_accum_ms = 0.0

        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, grid)
        panel.draw(screen, grid, tick_count=total_ticks)
        pygame.display.flip()

    logger.info("exiting after %d ticks", total_ticks)
    pygame.quit()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Falling sand sandbox")
    parser.add_argument("--config", default=None, help="Settings JSON (default: configs/settings.json)")
    parser.add_argument("--width", type=int, default=None, help="World width in cells")
    parser.add_argument("--height", type=int, default=None, help="World height in cells")
    parser.add_argument("--seed", type=int, default=None, help="Tie-break seed (-1 = random)")
    args = parser.parse_args(argv)
    run(config_path=args.config, width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
