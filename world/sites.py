# world/sites.py
"""
Building site allocation.

Structures owned by callers outside the world are given homes one at a time:
find_site() proposes a tile, commit() confirms it. Allocation spreads
structures across biomes (least-used biome first) and keeps them apart
(no two sites within SITE_SPACING tiles), falling back to a crowded tile only
when nothing well-spaced is left.

All state lives in SiteAllocator and only commit() mutates it, so find_site()
is stable: two calls without a commit in between return the same site.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple

import numpy as np
from scipy import ndimage

from config import SITE_MARGIN, SITE_SPACING, SITE_TILE_TYPES
from utils import in_grid
from world.biomes import BIOME_TYPES
from world.grid import OutOfBoundsError, WorldGrid

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

# 3x3 block: a tile and its 8 neighbours
_NEIGHBORHOOD = np.ones((3, 3), dtype=bool)


class Site(NamedTuple):
    """A proposed building site in world coordinates."""
    x: int
    z: int
    biome: str
    height: float


class Placement(NamedTuple):
    """A confirmed placement, as recorded in the tally."""
    x: int
    z: int
    biome: str


@dataclass
class SiteAllocator:
    """Occupancy registry and site search over one world grid.

    Attributes:
        grid: World the sites are drawn from
        occupied: [gx, gz] mask; each commit reserves a 3x3 block
        placements: Confirmed placements in commit order
    """
    grid: WorldGrid
    occupied: np.ndarray = field(init=False, repr=False)
    placements: List[Placement] = field(default_factory=list)
    _eligible: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.occupied = np.zeros((self.grid.size, self.grid.size), dtype=bool)
        self._eligible = eligible_site_mask(self.grid)

    # =========================================================================
    # Queries
    # =========================================================================

    def biome_counts(self) -> Counter:
        """Number of confirmed placements per biome."""
        return Counter(p.biome for p in self.placements)

    def is_occupied(self, x: int, z: int) -> bool:
        gx, gz = self.grid.to_grid(x, z)
        return in_grid(gx, gz, self.grid.size) and bool(self.occupied[gx, gz])

    def candidates(self) -> List[Site]:
        """Every currently free, eligible tile in generation order."""
        half = self.grid.half
        mask = self._eligible & ~self.occupied
        return [
            Site(int(gx) - half, int(gz) - half, str(self.grid.biome_grid[gx, gz]),
                 float(self.grid.height_grid[gx, gz]))
            for gx, gz in np.argwhere(mask)
        ]

    def find_site(self) -> Optional[Site]:
        """Propose the next building site, or None if no tile qualifies.

        Biomes are tried least-placed first (ties keep the order in which the
        biome was first met). Within a biome the first candidate clear of
        every occupied tile by more than SITE_SPACING wins. When every
        candidate is crowded, the first candidate of the least-placed biome
        is returned instead.
        """
        candidates = self.candidates()
        if not candidates:
            logger.warning("No eligible building site left (%d placed)", len(self.placements))
            return None

        by_biome: Dict[str, List[Site]] = {}
        for site in candidates:
            by_biome.setdefault(site.biome, []).append(site)

        counts = self.biome_counts()
        order = sorted(by_biome, key=lambda biome: counts[biome])

        crowded = self._crowded_mask()
        half = self.grid.half
        for biome in order:
            for site in by_biome[biome]:
                if not crowded[site.x + half, site.z + half]:
                    return site

        fallback = by_biome[order[0]][0]
        logger.warning(
            "No well-spaced site left, falling back to (%d, %d) in %s",
            fallback.x, fallback.z, fallback.biome,
        )
        return fallback

    # =========================================================================
    # Mutation
    # =========================================================================

    def commit(self, x: int, z: int) -> Placement:
        """Confirm a placement at a world coordinate.

        Marks the tile and its 8 neighbours occupied and adds one record to
        the placement tally. Re-marking is harmless, but each call counts, so
        call this exactly once per structure.

        Raises:
            OutOfBoundsError: (x, z) is not on the map
        """
        gx, gz = self.grid.to_grid(x, z)
        if not in_grid(gx, gz, self.grid.size):
            raise OutOfBoundsError(f"Cannot place a structure at ({x}, {z}): off the map")

        lo_x, hi_x = max(0, gx - 1), min(self.grid.size, gx + 2)
        lo_z, hi_z = max(0, gz - 1), min(self.grid.size, gz + 2)
        self.occupied[lo_x:hi_x, lo_z:hi_z] = True

        placement = Placement(int(x), int(z), str(self.grid.biome_grid[gx, gz]))
        self.placements.append(placement)
        logger.info("Placed structure %d at (%d, %d) in %s",
                    len(self.placements), placement.x, placement.z, placement.biome)
        return placement

    def reset(self) -> None:
        """Forget every placement (start of a new session)."""
        self.occupied[:] = False
        self.placements.clear()

    def _crowded_mask(self) -> np.ndarray:
        """Tiles within SITE_SPACING (Chebyshev) of any occupied tile."""
        window = np.ones((2 * SITE_SPACING + 1, 2 * SITE_SPACING + 1), dtype=bool)
        return ndimage.binary_dilation(self.occupied, structure=window)


def eligible_site_mask(grid: WorldGrid) -> np.ndarray:
    """Tiles that could ever host a structure, ignoring occupancy.

    A tile qualifies when it sits SITE_MARGIN or more from every edge, is
    grass or sand, lies in a buildable biome, and has no water in its
    3x3 neighbourhood.
    """
    size = grid.size
    interior = np.zeros((size, size), dtype=bool)
    interior[SITE_MARGIN:size - SITE_MARGIN, SITE_MARGIN:size - SITE_MARGIN] = True

    land_type = np.isin(grid.type_grid, SITE_TILE_TYPES)
    buildable_biomes = [name for name, biome in BIOME_TYPES.items() if biome.buildable]
    allowed_biome = np.isin(grid.biome_grid, buildable_biomes)
    near_water = ndimage.binary_dilation(grid.water_mask, structure=_NEIGHBORHOOD)

    return interior & land_type & allowed_biome & ~near_water
