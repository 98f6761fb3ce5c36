"""
Display colours per material. Air has no colour: material_color raises UnsupportedMaterial and
the renderer skips air cells, leaving the background showing.
"""

import numpy as np

from world.errors import UnsupportedMaterial
from world.materials import Material, MaterialKind

BACKGROUND = (0, 0, 0)

MATERIAL_COLORS = {
    MaterialKind.STONE: (130, 130, 130),  # gray
    MaterialKind.SAND: (253, 249, 0),     # yellow
    MaterialKind.WATER: (0, 121, 241),    # blue
    MaterialKind.LAVA: (230, 41, 55),     # red
}


def material_color(m: Material) -> tuple[int, int, int]:
    try:
        return MATERIAL_COLORS[m.kind]
    except KeyError:
        raise UnsupportedMaterial(f"{m.kind.name} does not have a colour") from None


def _lookup_table(background: tuple[int, int, int]) -> np.ndarray:
    """(n_kinds, 3) uint8; kinds without a colour map to background."""
    lut = np.empty((len(MaterialKind), 3), dtype=np.uint8)
    lut[:] = background
    for kind, rgb in MATERIAL_COLORS.items():
        lut[int(kind)] = rgb
    return lut


def grid_to_rgb(kind_codes: np.ndarray, background: tuple[int, int, int] = BACKGROUND) -> np.ndarray:
    """(height, width) kind codes -> (height, width, 3) uint8 RGB."""
    return _lookup_table(background)[kind_codes.astype(np.intp)]
