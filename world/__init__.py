"""World: material model, grid, and the tick-driven falling-sand update."""

from world.grid import Grid, create_grid, get_cell, set_cell, grid_width, grid_height
from world.engine import tick, TickStats
from world.materials import (
    Material, MaterialKind, FlowBias, Phase,
    AIR, STONE, SAND, WATER, LAVA, PALETTE,
    density, phase, is_static, can_displace, flow_bias, with_flow_bias, cycle_material,
)
from world.errors import SimulationError, UnsupportedMaterial, InvalidOperation
from world.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, TICK_INTERVAL_MS

__all__ = [
    "Grid", "create_grid", "get_cell", "set_cell", "grid_width", "grid_height",
    "tick", "TickStats",
    "Material", "MaterialKind", "FlowBias", "Phase",
    "AIR", "STONE", "SAND", "WATER", "LAVA", "PALETTE",
    "density", "phase", "is_static", "can_displace", "flow_bias", "with_flow_bias", "cycle_material",
    "SimulationError", "UnsupportedMaterial", "InvalidOperation",
    "DEFAULT_WIDTH", "DEFAULT_HEIGHT", "TICK_INTERVAL_MS",
]
