import random
from dataclasses import replace

import pytest

from config import SITE_MARGIN, SITE_SPACING
from utils import chebyshev_distance
from world.biomes import BIOME_TYPES
from world.generation import generate_grid
from world.grid import OutOfBoundsError
from world.sites import SiteAllocator


def _allocator(seed):
    return SiteAllocator(generate_grid(random.Random(seed)))


def _block(x, z):
    return {(x + dx, z + dz) for dx in (-1, 0, 1) for dz in (-1, 0, 1)}


def test_site_meets_placement_rules():
    for seed in range(10):
        allocator = _allocator(seed)
        grid = allocator.grid
        site = allocator.find_site()
        assert site is not None
        gx, gz = site.x + grid.half, site.z + grid.half
        assert SITE_MARGIN <= gx < grid.size - SITE_MARGIN
        assert SITE_MARGIN <= gz < grid.size - SITE_MARGIN
        assert site.biome != "mountain"
        assert grid.cell(gx, gz).type in ("grass", "sand")
        for x, z in _block(site.x, site.z):
            assert not grid.is_water(x, z), f"seed {seed}: water next to site {site}"


def test_find_site_is_stable_without_commit():
    allocator = _allocator(5)
    assert allocator.find_site() == allocator.find_site()


def test_committed_blocks_are_never_offered_again():
    allocator = _allocator(1)
    reserved = set()
    for _ in range(6):
        site = allocator.find_site()
        assert site is not None
        assert (site.x, site.z) not in reserved
        allocator.commit(site.x, site.z)
        reserved |= _block(site.x, site.z)
    for x, z in reserved:
        if allocator.grid.contains(x, z):
            assert allocator.is_occupied(x, z)


def test_second_site_is_well_spaced():
    for seed in range(5):
        allocator = _allocator(seed)
        first = allocator.find_site()
        allocator.commit(first.x, first.z)
        second = allocator.find_site()
        assert chebyshev_distance((first.x, first.z), (second.x, second.z)) > SITE_SPACING + 1


def test_six_structures_span_several_biomes():
    for seed in range(10):
        allocator = _allocator(seed)
        for _ in range(6):
            site = allocator.find_site()
            allocator.commit(site.x, site.z)
        assert len(allocator.biome_counts()) >= 2, f"seed {seed}: {allocator.placements}"


def test_commit_records_each_call():
    allocator = _allocator(2)
    site = allocator.find_site()
    first = allocator.commit(site.x, site.z)
    allocator.commit(site.x, site.z)
    assert first.biome == site.biome
    assert len(allocator.placements) == 2
    assert allocator.biome_counts()[site.biome] == 2


def test_commit_off_map_raises():
    allocator = _allocator(2)
    with pytest.raises(OutOfBoundsError):
        allocator.commit(40, 0)
    assert allocator.placements == []


def test_commit_on_rim_is_clipped():
    allocator = _allocator(2)
    allocator.commit(-14, -14)
    assert allocator.occupied.sum() == 4


def test_no_candidates_returns_none():
    allocator = _allocator(4)
    allocator.occupied[:] = True
    assert allocator.find_site() is None


def test_crowded_board_falls_back_to_free_candidate():
    allocator = _allocator(4)
    target = allocator.candidates()[0]
    allocator.occupied[:] = True
    allocator.occupied[target.x + allocator.grid.half, target.z + allocator.grid.half] = False
    assert allocator.find_site() == target


def test_reset_clears_placements():
    allocator = _allocator(6)
    site = allocator.find_site()
    allocator.commit(site.x, site.z)
    allocator.reset()
    assert allocator.placements == []
    assert not allocator.occupied.any()
    assert allocator.find_site() == site


def test_eligibility_follows_buildable_biomes(monkeypatch):
    monkeypatch.setitem(BIOME_TYPES, "desert", replace(BIOME_TYPES["desert"], buildable=False))
    for seed in range(5):
        allocator = _allocator(seed)
        biomes = {site.biome for site in allocator.candidates()}
        assert biomes <= {"meadow", "forest"}, f"seed {seed}: {biomes}"
