"""
Material model: what can occupy a cell and how materials rank against each other.
Movement legality is the density order only: a mover enters a cell iff it is strictly denser.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

from world.errors import InvalidOperation, UnsupportedMaterial


class MaterialKind(IntEnum):
    """Codes stored in Grid.kind."""

    AIR = 0
    STONE = 1
    SAND = 2
    WATER = 3
    LAVA = 4


class FlowBias(IntEnum):
    """Last horizontal direction a liquid moved. Codes stored in Grid.flow."""

    NONE = 0
    LEFT = 1
    RIGHT = 2


class Phase(Enum):
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"


# Stone is far above everything so new granular kinds can slot in below it.
DENSITY = {
    MaterialKind.AIR: 0,
    MaterialKind.WATER: 1,
    MaterialKind.LAVA: 2,
    MaterialKind.SAND: 3,
    MaterialKind.STONE: 100,
}

PHASE = {
    MaterialKind.AIR: Phase.GAS,
    MaterialKind.STONE: Phase.SOLID,
    MaterialKind.SAND: Phase.SOLID,
    MaterialKind.WATER: Phase.LIQUID,
    MaterialKind.LAVA: Phase.LIQUID,
}

STATIC_KINDS = frozenset({MaterialKind.AIR, MaterialKind.STONE})


@dataclass(frozen=True)
class Material:
    """Immutable cell content. Only liquids carry a flow bias."""

    kind: MaterialKind
    flow_bias: FlowBias = FlowBias.NONE

    def __post_init__(self) -> None:
        if self.flow_bias != FlowBias.NONE and phase(self) is not Phase.LIQUID:
            raise InvalidOperation(f"{self.kind.name} cannot carry flow bias {self.flow_bias.name}")

    @property
    def name(self) -> str:
        return self.kind.name.lower()


def density(m: Material) -> int:
    try:
        return DENSITY[m.kind]
    except KeyError:
        raise UnsupportedMaterial(f"no density for {m.kind!r}") from None


def phase(m: Material) -> Phase:
    try:
        return PHASE[m.kind]
    except KeyError:
        raise UnsupportedMaterial(f"no phase for {m.kind!r}") from None


def is_static(m: Material) -> bool:
    """Static cells never take part in movement resolution."""
    return m.kind in STATIC_KINDS


def is_liquid(m: Material) -> bool:
    return phase(m) is Phase.LIQUID


def can_displace(mover: Material, target: Material) -> bool:
    """True iff mover may move into a cell holding target. Equal density never displaces."""
    return density(mover) > density(target)


def flow_bias(m: Material) -> FlowBias:
    if is_liquid(m):
        return m.flow_bias
    return FlowBias.NONE


def with_flow_bias(m: Material, bias: FlowBias) -> Material:
    """Copy of a liquid with a new bias. Non-liquids raise InvalidOperation."""
    if not is_liquid(m):
        raise InvalidOperation(f"{m.kind.name} is not a liquid")
    return Material(m.kind, FlowBias(bias))


AIR = Material(MaterialKind.AIR)
STONE = Material(MaterialKind.STONE)
SAND = Material(MaterialKind.SAND)
WATER = Material(MaterialKind.WATER)
LAVA = Material(MaterialKind.LAVA)

# Paintable materials in mouse-wheel order.
PALETTE = (AIR, STONE, SAND, WATER, LAVA)


def cycle_material(current: Material, step: int) -> Material:
    """Neighbour of current in PALETTE, wrapping at both ends. Liquids match by kind."""
    kinds = [p.kind for p in PALETTE]
    try:
        i = kinds.index(current.kind)
    except ValueError:
        raise UnsupportedMaterial(f"{current.kind!r} is not paintable") from None
    return PALETTE[(i + step) % len(PALETTE)]
