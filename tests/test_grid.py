import random

import pytest

from config import DEFAULT_TILE_HEIGHT, GRID, UNKNOWN_BIOME
from world.biomes import distance_to_midline, quadrant_index
from world.generation import generate_grid
from world.grid import OutOfBoundsError, world_range
from world.terrain import TileType


def test_grid_has_every_tile(grid):
    assert len(grid) == GRID * GRID
    assert grid.water_mask.shape == (GRID, GRID)


def test_world_range_covers_grid():
    coords = list(world_range(GRID))
    assert coords[0] == -14
    assert coords[-1] == 13
    assert len(coords) == GRID


def test_every_world_coordinate_has_a_tile(grid):
    for x in world_range(GRID):
        for z in world_range(GRID):
            assert grid.tile_at(x, z) is not None


def test_off_map_queries_are_total(grid):
    assert grid.tile_at(14, 0) is None
    assert grid.tile_at(-15, 0) is None
    assert grid.height_at(100, 100) == DEFAULT_TILE_HEIGHT
    assert grid.biome_at(50, 0) == UNKNOWN_BIOME
    assert grid.is_water(-40, 3) is False


def test_world_lookup_rounds_to_nearest_tile(grid):
    assert grid.tile_at(0.4, -0.4) is grid.tile_at(0, 0)
    assert grid.tile_at(2.5, 0) is grid.tile_at(3, 0)
    assert grid.tile_at(-2.5, 0) is grid.tile_at(-2, 0)


def test_height_matches_tile(grid):
    tile = grid.tile_at(-5, 7)
    assert grid.height_at(-5, 7) == tile.height
    assert grid.biome_at(-5, 7) == tile.biome


def test_require_tile_and_index_raise_off_map(grid):
    with pytest.raises(OutOfBoundsError):
        grid.require_tile(20, 0)
    with pytest.raises(OutOfBoundsError):
        grid.index(-1, 0)
    assert grid.require_tile(0, 0) is grid.tile_at(0, 0)


def test_river_cells_are_water(grid):
    for gx, gz in grid.river.tiles:
        assert grid.cell(gx, gz).type == TileType.WATER
    assert len(grid.water_tiles()) == len(grid.river)


def test_biomes_follow_quadrants(grid):
    for gx, gz, tile in grid.cells():
        if distance_to_midline(gx, gz) > 2:
            assert tile.biome == grid.assignment[quadrant_index(gx, gz)]


def test_bridge_path_spans_both_banks(grid):
    bridge = grid.bridge
    assert bridge is not None
    path = grid.path_tiles()
    xs = sorted(x for x, _ in path)
    assert xs[0] == bridge.min_col - 1 - grid.half
    assert xs[-1] == bridge.max_col + 1 - grid.half
    assert all(z == bridge.row - grid.half for _, z in path)
    assert grid.path_mask.sum() == len(path)


def test_seed_reproduces_grid():
    a = generate_grid(random.Random(21))
    b = generate_grid(random.Random(21))
    assert a.assignment == b.assignment
    assert a.river.tiles == b.river.tiles
    assert a.tiles == b.tiles


def test_wrong_tile_count_is_rejected(grid):
    with pytest.raises(ValueError):
        type(grid)(grid.size, grid.assignment, grid.river, grid.bridge, grid.tiles[:-1])
