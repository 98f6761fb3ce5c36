"""2D grid of materials. Row-major (height, width); row 0 is the top, so "below" is y + 1."""

import numpy as np

from world.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT
from world.materials import AIR, FlowBias, Material, MaterialKind


class Grid:
    """Kind and flow-bias arrays; all access bounds-checked. Out of range reads give None, writes do nothing."""

    __slots__ = ("shape", "kind", "flow")

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.shape = (int(height), int(width))
        self.kind = np.full(self.shape, MaterialKind.AIR, dtype=np.int8)
        self.flow = np.full(self.shape, FlowBias.NONE, dtype=np.int8)

    @property
    def width(self) -> int:
        return self.shape[1]

    @property
    def height(self) -> int:
        return self.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.shape[1] and 0 <= y < self.shape[0]

    def get_cell(self, x: int, y: int) -> Material | None:
        if not self.in_bounds(x, y):
            return None
        return Material(MaterialKind(int(self.kind[y, x])), FlowBias(int(self.flow[y, x])))

    def set_cell(self, x: int, y: int, material: Material) -> None:
        if not self.in_bounds(x, y):
            return
        self.kind[y, x] = material.kind
        self.flow[y, x] = material.flow_bias

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange two in-bounds cells. Callers check bounds first."""
        (ax, ay), (bx, by) = a, b
        self.kind[ay, ax], self.kind[by, bx] = self.kind[by, bx], self.kind[ay, ax]
        self.flow[ay, ax], self.flow[by, bx] = self.flow[by, bx], self.flow[ay, ax]

    def clear(self) -> None:
        self.kind.fill(MaterialKind.AIR)
        self.flow.fill(FlowBias.NONE)

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, material: Material) -> None:
        """Paint the inclusive rectangle, clipped to the grid."""
        h, w = self.shape
        xa, xb = max(0, min(x0, x1)), min(w - 1, max(x0, x1))
        ya, yb = max(0, min(y0, y1)), min(h - 1, max(y0, y1))
        if xa > xb or ya > yb:
            return
        self.kind[ya : yb + 1, xa : xb + 1] = material.kind
        self.flow[ya : yb + 1, xa : xb + 1] = material.flow_bias

    def count(self, kind: MaterialKind) -> int:
        return int(np.count_nonzero(self.kind == kind))

    def kind_codes(self) -> np.ndarray:
        return self.kind.copy()


def create_grid(width: int, height: int) -> Grid:
    """New grid with every cell AIR."""
    return Grid(width, height)


def get_cell(grid: Grid, x: int, y: int) -> Material | None:
    return grid.get_cell(x, y)


def set_cell(grid: Grid, x: int, y: int, material: Material = AIR) -> None:
    grid.set_cell(x, y, material)


def grid_width(grid: Grid) -> int:
    return grid.width


def grid_height(grid: Grid) -> int:
    return grid.height
