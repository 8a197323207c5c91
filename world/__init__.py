# world/__init__.py
"""
World module: noise, biomes, river, tiles, grid, sites and decorations.

Provides:
- Deterministic per-cell noise (from noise.py)
- Quadrant biome assignment and blending (from biomes.py)
- River path and bridge selection (from river.py)
- Tile types and classification (from terrain.py)
- The world grid and its generation (from grid.py, generation.py)
- Building site allocation (from sites.py)
- Decoration scattering (from decorations.py)
"""

# Noise
from world.noise import pseudo_random

# Biomes
from world.biomes import (
    BIOME_TYPES,
    BiomeType,
    assign_biomes,
    biome_at,
    quadrant_index,
)

# River
from world.river import BridgeSite, River, find_bridge_location, generate_river_path

# Tiles
from world.terrain import PALETTE, TileRecord, TileType, classify_tile

# Grid
from world.grid import OutOfBoundsError, WorldGrid
from world.generation import generate_grid

# Sites
from world.sites import Placement, Site, SiteAllocator

# Decorations
from world.decorations import (
    Decoration,
    DecorationKind,
    decorations_near,
    scatter_decorations,
)

__all__ = [
    # Noise
    "pseudo_random",
    # Biomes
    "BIOME_TYPES",
    "BiomeType",
    "assign_biomes",
    "biome_at",
    "quadrant_index",
    # River
    "BridgeSite",
    "River",
    "find_bridge_location",
    "generate_river_path",
    # Tiles
    "PALETTE",
    "TileRecord",
    "TileType",
    "classify_tile",
    # Grid
    "OutOfBoundsError",
    "WorldGrid",
    "generate_grid",
    # Sites
    "Placement",
    "Site",
    "SiteAllocator",
    # Decorations
    "Decoration",
    "DecorationKind",
    "decorations_near",
    "scatter_decorations",
]
