"""
Per-tick update: one bottom-to-top sweep of the grid.
Solids fall straight down, else diagonally down. Liquids do the same and, if they could not fall,
flow one cell sideways, preferring the direction they last moved. Ties between candidate cells are
broken by a single rng.choice over an ordered [left, right] list, so a seeded rng replays a run.
"""

import logging
import random
from dataclasses import dataclass

from world.constants import SIDE_OFFSETS
from world.errors import UnsupportedMaterial
from world.grid import Grid
from world.materials import (
    FlowBias,
    Material,
    Phase,
    can_displace,
    flow_bias,
    is_static,
    phase,
    with_flow_bias,
)

logger = logging.getLogger(__name__)

_default_rng = random.Random()


@dataclass
class TickStats:
    straight: int = 0
    diagonal: int = 0
    flowed: int = 0

    @property
    def moved(self) -> int:
        return self.straight + self.diagonal + self.flowed


def _fall(grid: Grid, x: int, y: int, rng: random.Random) -> str | None:
    """Move the cell one row down if it can. Returns "straight", "diagonal" or None."""
    if y >= grid.height - 1:
        return None
    mover = grid.get_cell(x, y)
    below = y + 1
    if can_displace(mover, grid.get_cell(x, below)):
        grid.swap((x, y), (x, below))
        return "straight"
    candidates = []
    for dx in SIDE_OFFSETS:
        nx = x + dx
        if not grid.in_bounds(nx, below):
            continue
        # The same-row neighbour must not block either, or sand would slip through walls.
        if can_displace(mover, grid.get_cell(nx, below)) and can_displace(mover, grid.get_cell(nx, y)):
            candidates.append(nx)
    if not candidates:
        return None
    grid.swap((x, y), (rng.choice(candidates), below))
    return "diagonal"


def apply_gravity(grid: Grid, x: int, y: int, rng: random.Random | None = None) -> bool:
    """Resolve gravity for (x, y); True if the cell moved."""
    return _fall(grid, x, y, rng or _default_rng) is not None


def apply_side_flow(
    grid: Grid,
    x: int,
    y: int,
    rng: random.Random | None = None,
    updated: set[tuple[int, int]] | None = None,
) -> bool:
    """Flow a liquid at (x, y) one cell left or right. Records the destination in updated."""
    rng = rng or _default_rng
    mover = grid.get_cell(x, y)
    candidates = [
        x + dx for dx in SIDE_OFFSETS
        if grid.in_bounds(x + dx, y) and can_displace(mover, grid.get_cell(x + dx, y))
    ]
    if len(candidates) > 1:
        bias = flow_bias(mover)
        if bias == FlowBias.LEFT:
            candidates = [x - 1]
        elif bias == FlowBias.RIGHT:
            candidates = [x + 1]
    if not candidates:
        return False
    target = rng.choice(candidates)
    moved = with_flow_bias(mover, FlowBias.LEFT if target < x else FlowBias.RIGHT)
    grid.swap((x, y), (target, y))
    grid.set_cell(target, y, moved)
    if updated is not None:
        updated.add((target, y))
    return True


def _update_cell(
    grid: Grid,
    x: int,
    y: int,
    material: Material,
    rng: random.Random,
    updated: set[tuple[int, int]],
    stats: TickStats,
) -> None:
    p = phase(material)
    if p is Phase.SOLID:
        fell = _fall(grid, x, y, rng)
    elif p is Phase.LIQUID:
        fell = _fall(grid, x, y, rng)
        if fell is None and apply_side_flow(grid, x, y, rng, updated):
            stats.flowed += 1
    else:
        raise UnsupportedMaterial(f"no update rule for {material.kind.name} ({p.value})")
    if fell == "straight":
        stats.straight += 1
    elif fell == "diagonal":
        stats.diagonal += 1


def tick(grid: Grid, rng: random.Random | None = None) -> TickStats:
    """Advance the grid by exactly one step. Rows bottom to top, columns left to right."""
    rng = rng or _default_rng
    updated: set[tuple[int, int]] = set()
    stats = TickStats()
    for y in range(grid.height - 1, -1, -1):
        for x in range(grid.width):
            material = grid.get_cell(x, y)
            if is_static(material) or (x, y) in updated:
                continue
            _update_cell(grid, x, y, material, rng, updated, stats)
    logger.debug(
        "tick: %d straight, %d diagonal, %d flowed", stats.straight, stats.diagonal, stats.flowed
    )
    return stats

