# world/grid.py
"""
World grid: the system of record for every tile.

Tiles are stored in a flat list indexed by gz * size + gx. Masks used for
vectorized queries (water, bridge path, tile type, biome, height) are NumPy
arrays indexed [gx, gz], the same orientation as the rest of the grid code.

World-space lookups are total: out-of-range queries return None, the default
height, or the "unknown" biome. The explicit require_* and index helpers
raise OutOfBoundsError instead.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from config import BRIDGE_PATH_OVERHANG, DEFAULT_TILE_HEIGHT, GRID, UNKNOWN_BIOME
from utils import in_grid, round_half_up
from world.river import BridgeSite, River
from world.terrain import TileRecord, TileType

Point = Tuple[int, int]


class OutOfBoundsError(ValueError):
    """A coordinate outside the grid was passed where a tile is required."""


@dataclass
class WorldGrid:
    """All tiles of one generated world plus the data they were built from.

    Attributes:
        size: Grid side length
        assignment: Biome per quadrant (index 0-3)
        river: River tiles in grid-space
        bridge: Crossing site, or None if the river misses the central band
        tiles: Flat tile list, index gz * size + gx
    """
    size: int
    assignment: Sequence[str]
    river: River
    bridge: Optional[BridgeSite]
    tiles: List[TileRecord]
    water_mask: np.ndarray = field(init=False, repr=False)
    path_mask: np.ndarray = field(init=False, repr=False)
    type_grid: np.ndarray = field(init=False, repr=False)
    biome_grid: np.ndarray = field(init=False, repr=False)
    height_grid: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.tiles) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} tiles, got {len(self.tiles)}"
            )
        shape = (self.size, self.size)
        self.type_grid = np.empty(shape, dtype="U16")
        self.biome_grid = np.empty(shape, dtype="U16")
        self.height_grid = np.zeros(shape, dtype=np.float64)
        for gx, gz, tile in self.cells():
            self.type_grid[gx, gz] = tile.type
            self.biome_grid[gx, gz] = tile.biome
            self.height_grid[gx, gz] = tile.height
        self.water_mask = self.type_grid == TileType.WATER

        self.path_mask = np.zeros(shape, dtype=bool)
        if self.bridge is not None:
            for gx, gz in self.bridge_path_cells():
                self.path_mask[gx, gz] = True

    @property
    def half(self) -> int:
        return self.size // 2

    # =========================================================================
    # Grid-space access
    # =========================================================================

    def index(self, gx: int, gz: int) -> int:
        """Flat tile index for a grid cell."""
        if not in_grid(gx, gz, self.size):
            raise OutOfBoundsError(f"Grid cell ({gx}, {gz}) is outside a {self.size} grid")
        return gz * self.size + gx

    def cell(self, gx: int, gz: int) -> TileRecord:
        return self.tiles[self.index(gx, gz)]

    def cells(self) -> Iterator[Tuple[int, int, TileRecord]]:
        """Yield (gx, gz, tile) with gx as the outer loop (generation order)."""
        for gx in range(self.size):
            for gz in range(self.size):
                yield gx, gz, self.tiles[gz * self.size + gx]

    def bridge_path_cells(self) -> List[Point]:
        """Grid cells walked by the bridge deck, one past each river bank."""
        if self.bridge is None:
            return []
        lo = self.bridge.min_col - BRIDGE_PATH_OVERHANG
        hi = self.bridge.max_col + BRIDGE_PATH_OVERHANG
        return [(gx, self.bridge.row) for gx in range(lo, hi + 1) if in_grid(gx, self.bridge.row, self.size)]

    # =========================================================================
    # World-space access
    # =========================================================================

    def to_grid(self, x: float, z: float) -> Point:
        """Nearest grid cell for a world position (may be out of bounds)."""
        return round_half_up(x) + self.half, round_half_up(z) + self.half

    def contains(self, x: float, z: float) -> bool:
        return in_grid(*self.to_grid(x, z), self.size)

    def tile_at(self, x: float, z: float) -> Optional[TileRecord]:
        """Tile nearest to a world position, or None off the map."""
        gx, gz = self.to_grid(x, z)
        if not in_grid(gx, gz, self.size):
            return None
        return self.tiles[gz * self.size + gx]

    def require_tile(self, x: float, z: float) -> TileRecord:
        """Like tile_at, but an off-map position is a contract violation."""
        gx, gz = self.to_grid(x, z)
        return self.cell(gx, gz)

    def height_at(self, x: float, z: float) -> float:
        """Surface height at a world position.

        Off-map positions return DEFAULT_TILE_HEIGHT (plain grass).
        """
        tile = self.tile_at(x, z)
        if tile is None:
            return DEFAULT_TILE_HEIGHT
        return tile.height

    def biome_at(self, x: float, z: float) -> str:
        """Biome at a world position, or "unknown" off the map."""
        tile = self.tile_at(x, z)
        if tile is None:
            return UNKNOWN_BIOME
        return tile.biome

    def is_water(self, x: float, z: float) -> bool:
        gx, gz = self.to_grid(x, z)
        return in_grid(gx, gz, self.size) and bool(self.water_mask[gx, gz])

    def water_tiles(self) -> List[Point]:
        """World coordinates of every water tile, in generation order."""
        return [(int(gx) - self.half, int(gz) - self.half) for gx, gz in np.argwhere(self.water_mask)]

    def path_tiles(self) -> List[Point]:
        """World coordinates of the bridge path."""
        return [(gx - self.half, gz - self.half) for gx, gz in self.bridge_path_cells()]

    def __len__(self) -> int:
        return len(self.tiles)


def world_range(size: int = GRID) -> range:
    """World-space coordinates covered by a grid, e.g. -14..13 for 28."""
    half = size // 2
    return range(-half, size - half)
