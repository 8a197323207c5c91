import random

from config import BIOME_LIST, GRID, TRANSITION_WIDTH
from world.biomes import (
    BIOME_TYPES,
    assign_biomes,
    biome_at,
    distance_to_midline,
    quadrant_index,
)

ASSIGNMENT = ["meadow", "forest", "desert", "mountain"]


def test_assign_biomes_is_a_permutation():
    for _ in range(50):
        biomes = assign_biomes()
        assert len(biomes) == 4
        assert sorted(biomes) == sorted(BIOME_LIST)


def test_assign_biomes_with_seed_is_reproducible():
    assert assign_biomes(random.Random(3)) == assign_biomes(random.Random(3))


def test_assign_biomes_reaches_every_ordering():
    rng = random.Random(0)
    orderings = {tuple(assign_biomes(rng)) for _ in range(2000)}
    assert len(orderings) == 24


def test_quadrant_index_corners_and_midlines():
    assert quadrant_index(0, 0) == 0
    assert quadrant_index(GRID - 1, 0) == 1
    assert quadrant_index(0, GRID - 1) == 2
    assert quadrant_index(GRID - 1, GRID - 1) == 3
    assert quadrant_index(13, 13) == 0
    assert quadrant_index(14, 14) == 3


def test_biome_at_quadrant_interior():
    assert biome_at(3, 3, ASSIGNMENT) == "meadow"
    assert biome_at(24, 3, ASSIGNMENT) == "forest"
    assert biome_at(3, 24, ASSIGNMENT) == "desert"
    assert biome_at(24, 24, ASSIGNMENT) == "mountain"


def test_biome_at_outside_band_matches_quadrant():
    for gx in range(GRID):
        for gz in range(GRID):
            if distance_to_midline(gx, gz) > TRANSITION_WIDTH:
                assert biome_at(gx, gz, ASSIGNMENT) == ASSIGNMENT[quadrant_index(gx, gz)]


def test_biome_at_inside_band_is_always_assigned():
    for gx in range(GRID):
        for gz in range(GRID):
            if distance_to_midline(gx, gz) <= TRANSITION_WIDTH:
                assert biome_at(gx, gz, ASSIGNMENT) in ASSIGNMENT


def test_biome_table_covers_every_biome():
    assert set(BIOME_TYPES) == set(BIOME_LIST)
    assert not BIOME_TYPES["mountain"].buildable
