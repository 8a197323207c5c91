# world/generation.py
"""
One-pass world grid generation.

Order: biome assignment -> river -> bridge -> per-cell classification.
The biome shuffle and the river's start column are the only coarse random
draws; both come from the generator passed in, so a seeded generator gives a
byte-identical grid.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional

from config import GRID
from world.biomes import assign_biomes, biome_at
from world.grid import WorldGrid
from world.river import find_bridge_location, generate_river_path
from world.terrain import TileRecord, classify_tile

logger = logging.getLogger(__name__)


def generate_grid(rng: Optional[random.Random] = None, size: int = GRID) -> WorldGrid:
    """Build every tile of a new world.

    Args:
        rng: Source for the coarse random choices. None uses the
            module-level random source (a different world every call).
        size: Grid side length

    Returns:
        Fully populated WorldGrid
    """
    assignment = assign_biomes(rng)
    river = generate_river_path(rng, size)
    bridge = find_bridge_location(river, size)

    tiles: List[Optional[TileRecord]] = [None] * (size * size)
    for gx in range(size):
        for gz in range(size):
            biome = biome_at(gx, gz, assignment, size)
            tiles[gz * size + gx] = classify_tile(gx, gz, biome, (gx, gz) in river, size)

    grid = WorldGrid(size=size, assignment=assignment, river=river, bridge=bridge, tiles=tiles)
    logger.debug(
        "Generated %dx%d grid: quadrants=%s river=%d tiles bridge=%s",
        size, size, list(assignment), len(river),
        f"row {bridge.row}" if bridge else "none",
    )
    return grid
