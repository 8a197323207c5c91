import numpy as np

from config import DECORATION_CHANCE
from utils import edge_distance
from world.decorations import (
    BIOME_DECORATIONS,
    Decoration,
    DecorationKind,
    decoration_roll,
    decorations_near,
    scatter_decorations,
)
from world.terrain import TileType


def test_scatter_is_deterministic(grid):
    assert scatter_decorations(grid) == scatter_decorations(grid)


def test_decorations_match_their_tile(grid):
    for deco in scatter_decorations(grid):
        tile = grid.tile_at(deco.x, deco.z)
        gx, gz = deco.x + grid.half, deco.z + grid.half
        assert not tile.is_water
        assert deco.kind == BIOME_DECORATIONS[tile.biome]
        assert decoration_roll(gx, gz) < DECORATION_CHANCE[tile.biome]
        if deco.kind == DecorationKind.BOULDER:
            assert tile.type != TileType.MOUNTAIN_PEAK
        if deco.kind == DecorationKind.TREE:
            assert edge_distance(gx, gz, grid.size) >= 2


def test_every_qualifying_tile_is_decorated(grid):
    expected = set()
    for gx, gz, tile in grid.cells():
        if tile.is_water or decoration_roll(gx, gz) >= DECORATION_CHANCE[tile.biome]:
            continue
        if tile.type == TileType.MOUNTAIN_PEAK:
            continue
        if tile.biome == "forest" and edge_distance(gx, gz, grid.size) < 2:
            continue
        expected.add((gx - grid.half, gz - grid.half))
    assert {d.anchor for d in scatter_decorations(grid)} == expected


def test_variants_are_in_range(grid):
    allowed = {
        DecorationKind.WILDFLOWER: {0, 1, 2},
        DecorationKind.TREE: {0, 1},
        DecorationKind.ROCK_FORMATION: {2, 3},
        DecorationKind.BOULDER: {0, 1},
    }
    for deco in scatter_decorations(grid):
        assert deco.variant in allowed[deco.kind]
        if deco.kind == DecorationKind.WILDFLOWER:
            assert all(-0.3 <= o < 0.3 for o in deco.offset)
        else:
            assert deco.offset == (0.0, 0.0)


def test_occupied_tiles_stay_clear(grid):
    occupied = np.zeros((grid.size, grid.size), dtype=bool)
    occupied[:, :14] = True
    for deco in scatter_decorations(grid, occupied):
        assert deco.z + grid.half >= 14
    occupied[:] = True
    assert scatter_decorations(grid, occupied) == []


def test_decorations_near_uses_square_radius():
    decos = [
        Decoration(DecorationKind.TREE, 0, 0, (0.0, 0.0), 0),
        Decoration(DecorationKind.TREE, 2, -2, (0.0, 0.0), 1),
        Decoration(DecorationKind.TREE, 3, 0, (0.0, 0.0), 0),
    ]
    near = decorations_near(decos, 0, 0, 2)
    assert near == decos[:2]
    assert decorations_near(decos, 10, 10, 1) == []
