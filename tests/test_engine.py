import random

import numpy as np
import pytest

from world import materials
from world.engine import apply_gravity, apply_side_flow, tick
from world.errors import UnsupportedMaterial
from world.grid import Grid
from world.materials import AIR, LAVA, SAND, STONE, WATER, FlowBias, Material, MaterialKind, Phase


def _row(grid: Grid, y: int = 0) -> list:
    return [grid.get_cell(x, y) for x in range(grid.width)]


def test_sand_falls_one_row_per_tick_then_rests():
    g = Grid(3, 3)
    g.set_cell(1, 0, SAND)
    tick(g)
    assert g.get_cell(1, 1) == SAND and g.get_cell(1, 0) == AIR
    tick(g)
    assert g.get_cell(1, 2) == SAND and g.get_cell(1, 1) == AIR
    tick(g)
    assert g.get_cell(1, 2) == SAND
    assert g.count(MaterialKind.SAND) == 1


def test_sand_on_floor_with_blocked_diagonals_is_stable():
    g = Grid(3, 3)
    g.fill_rect(0, 2, 2, 2, STONE)
    g.set_cell(1, 1, SAND)
    for _ in range(20):
        tick(g, random.Random(3))
    assert g.get_cell(1, 1) == SAND
    assert g.count(MaterialKind.SAND) == 1


def test_sand_slides_diagonally_off_a_pillar():
    g = Grid(3, 2)
    g.set_cell(1, 1, STONE)
    g.set_cell(1, 0, SAND)
    stats = tick(g, random.Random(0))
    assert stats.diagonal == 1
    assert g.get_cell(0, 1) == SAND or g.get_cell(2, 1) == SAND
    assert g.get_cell(1, 0) == AIR


def test_diagonal_blocked_by_same_row_neighbour():
    g = Grid(3, 2)
    g.set_cell(1, 1, STONE)
    g.set_cell(0, 0, STONE)
    g.set_cell(1, 0, SAND)
    for seed in range(10):
        h = Grid(3, 2)
        h.kind[:], h.flow[:] = g.kind, g.flow
        tick(h, random.Random(seed))
        assert h.get_cell(2, 1) == SAND


def test_no_tunnelling_between_walls():
    g = Grid(3, 2)
    g.fill_rect(0, 0, 2, 0, STONE)
    g.set_cell(1, 1, STONE)
    g.set_cell(1, 0, SAND)
    assert not apply_gravity(g, 1, 0, random.Random(0))
    assert g.get_cell(1, 0) == SAND


def test_sand_sinks_through_water():
    g = Grid(1, 2)
    g.set_cell(0, 0, SAND)
    g.set_cell(0, 1, WATER)
    tick(g)
    assert g.get_cell(0, 1) == SAND
    assert g.get_cell(0, 0) == WATER


def test_water_in_single_row_flows_away_from_wall():
    for seed in range(20):
        g = Grid(3, 1)
        g.set_cell(0, 0, WATER)
        tick(g, random.Random(seed))
        assert g.get_cell(0, 0) == AIR
        assert g.count(MaterialKind.WATER) == 1
        assert g.get_cell(1, 0) == Material(MaterialKind.WATER, FlowBias.RIGHT)


def test_unbiased_water_picks_both_directions():
    seen = set()
    for seed in range(50):
        g = Grid(3, 1)
        g.set_cell(1, 0, WATER)
        tick(g, random.Random(seed))
        seen.add(next(x for x in range(3) if g.get_cell(x, 0).kind == MaterialKind.WATER))
    assert seen == {0, 2}


def test_flow_bias_keeps_direction_until_blocked():
    rng = random.Random(7)
    g = Grid(7, 1)
    g.set_cell(3, 0, Material(MaterialKind.WATER, FlowBias.LEFT))
    for expected in (2, 1, 0):
        tick(g, rng)
        assert g.get_cell(expected, 0) == Material(MaterialKind.WATER, FlowBias.LEFT)
    tick(g, rng)
    assert g.get_cell(1, 0) == Material(MaterialKind.WATER, FlowBias.RIGHT)


def test_bias_ignored_when_preferred_side_blocked():
    g = Grid(3, 1)
    g.set_cell(0, 0, STONE)
    g.set_cell(1, 0, Material(MaterialKind.WATER, FlowBias.LEFT))
    tick(g, random.Random(1))
    assert g.get_cell(2, 0) == Material(MaterialKind.WATER, FlowBias.RIGHT)


def test_side_flow_moves_at_most_one_cell_per_tick():
    g = Grid(5, 1)
    g.set_cell(0, 0, WATER)
    stats = tick(g, random.Random(0))
    assert stats.flowed == 1
    assert g.get_cell(1, 0).kind == MaterialKind.WATER
    assert g.count(MaterialKind.WATER) == 1


def test_side_flow_records_destination():
    g = Grid(2, 1)
    g.set_cell(0, 0, WATER)
    updated = set()
    assert apply_side_flow(g, 0, 0, random.Random(0), updated)
    assert updated == {(1, 0)}


def test_boxed_in_liquid_keeps_its_bias():
    g = Grid(3, 1)
    g.set_cell(0, 0, STONE)
    g.set_cell(2, 0, STONE)
    g.set_cell(1, 0, Material(MaterialKind.LAVA, FlowBias.RIGHT))
    stats = tick(g)
    assert stats.moved == 0
    assert g.get_cell(1, 0) == Material(MaterialKind.LAVA, FlowBias.RIGHT)


def test_lava_pushes_through_water_sideways():
    g = Grid(3, 1)
    g.set_cell(0, 0, LAVA)
    g.set_cell(1, 0, WATER)
    g.set_cell(2, 0, WATER)
    tick(g, random.Random(0))
    assert _row(g) == [WATER, Material(MaterialKind.LAVA, FlowBias.RIGHT), WATER]


def test_water_prefers_falling_over_flowing():
    g = Grid(3, 2)
    g.set_cell(1, 0, WATER)
    stats = tick(g, random.Random(0))
    assert stats.straight == 1 and stats.flowed == 0
    assert g.get_cell(1, 1) == WATER


def test_static_grid_never_changes():
    rng = np.random.default_rng(5)
    g = Grid(8, 6)
    g.kind[:] = np.where(rng.random(g.shape) < 0.4, MaterialKind.STONE, MaterialKind.AIR)
    before = g.kind.copy()
    for _ in range(10):
        assert tick(g).moved == 0
    assert (g.kind == before).all()


def test_seeded_runs_are_reproducible():
    def run(seed):
        g = Grid(10, 10)
        g.fill_rect(2, 0, 7, 2, SAND)
        g.fill_rect(0, 3, 9, 4, WATER)
        g.set_cell(5, 9, STONE)
        rng = random.Random(seed)
        for _ in range(15):
            tick(g, rng)
        return g.kind.copy(), g.flow.copy()

    a, b = run(11), run(11)
    assert (a[0] == b[0]).all() and (a[1] == b[1]).all()


def test_ticks_conserve_material_counts():
    g = Grid(12, 12)
    g.fill_rect(0, 0, 11, 1, SAND)
    g.fill_rect(3, 4, 8, 6, WATER)
    g.fill_rect(0, 11, 5, 11, STONE)
    g.set_cell(9, 3, LAVA)
    counts = {k: g.count(k) for k in MaterialKind}
    rng = random.Random(2)
    for _ in range(40):
        tick(g, rng)
    assert {k: g.count(k) for k in MaterialKind} == counts


def test_phase_without_update_rule_is_fatal(monkeypatch):
    monkeypatch.setitem(materials.PHASE, MaterialKind.SAND, Phase.GAS)
    g = Grid(2, 2)
    g.set_cell(0, 0, SAND)
    with pytest.raises(UnsupportedMaterial):
        tick(g)
