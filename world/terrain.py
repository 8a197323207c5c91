# world/terrain.py
"""
Tile types, colour classes, and tile classification.

classify_tile is a pure function of (position, biome, river membership): it
turns a grid cell into a TileRecord holding its type, surface height and
colour class. Colour classes are palette identifiers only; how they end up on
screen is the renderer's business.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from config import (
    DEFAULT_TILE_HEIGHT,
    GRASS_BASE_HEIGHT,
    GRASS_HEIGHT_VARIANCE,
    GRID,
    MOUNTAIN_BASE_HEIGHT,
    MOUNTAIN_EDGE_FALLOFF,
    MOUNTAIN_EDGE_RANGE,
    MOUNTAIN_HEIGHT_VARIANCE,
    MOUNTAIN_PEAK_RING,
    SAND_BASE_HEIGHT,
    SAND_HEIGHT_VARIANCE,
    WATER_HEIGHT,
    WATER_OPACITY,
)
from utils import edge_distance
from world.biomes import BIOME_TYPES
from world.noise import pseudo_random


class TileType:
    GRASS = "grass"
    SAND = "sand"
    MOUNTAIN = "mountain"
    MOUNTAIN_PEAK = "mountain_peak"
    WATER = "water"
    BRIDGE = "bridge"

    ALL = (GRASS, SAND, MOUNTAIN, MOUNTAIN_PEAK, WATER, BRIDGE)


# =============================================================================
# COLOUR CLASSES
# =============================================================================
# 24-bit colour identifiers, single source of truth for tiles and decorations
PALETTE: Dict[str, int] = {
    # Meadow
    "grass": 0xA8CC9A, "grassAlt": 0xB8DCA8,
    "wildflower1": 0xE8B8C8, "wildflower2": 0xC8D8E8, "wildflower3": 0xE8D8B0,
    # Forest
    "forestGrass": 0x88AA82, "forestGrassAlt": 0x749A70,
    "treeTrunk": 0x8B6850, "treeLeaves": 0x62A062, "treeLeavesAlt": 0x559255,
    # Desert
    "sand": 0xE2D4B0, "sandAlt": 0xD8C8A4, "rock": 0xB8A898,
    # Mountain
    "mountainStone": 0x9A9898, "mountainStoneAlt": 0xAAAA9E, "snow": 0xF0F0F8,
    # Water
    "water": 0x4AACE8, "waterDeep": 0x3898D8,
    # Paths
    "path": 0xDED4BC,
    # Shared
    "stone": 0xB8B0A0,
}

# (primary shade, alternate shade) per lowland biome
_LOWLAND_SHADES = {
    "meadow": ("grass", "grassAlt"),
    "forest": ("forestGrass", "forestGrassAlt"),
    "desert": ("sand", "sandAlt"),
}


@dataclass(frozen=True)
class TileRecord:
    """Classification of a single tile.

    Attributes:
        type: One of TileType
        height: Surface elevation (top of the tile)
        color: Colour class from PALETTE
        biome: Biome the cell was classified under (kept for water too)
        transparent: Only water tiles are see-through
        opacity: 1.0 except for water
    """
    type: str
    height: float
    color: int
    biome: str
    transparent: bool = False
    opacity: float = 1.0

    @property
    def is_water(self) -> bool:
        return self.type == TileType.WATER


def _shade(rng: float, primary: str, alternate: str) -> int:
    return PALETTE[primary] if rng > 0.5 else PALETTE[alternate]


def mountain_height(gx: int, gz: int, rng: float, size: int = GRID) -> float:
    """Mountain surface height, rising toward the map edge (0.25 inland, ~1.5 at the rim)."""
    edge_factor = max(0.0, 1 - edge_distance(gx, gz, size) / MOUNTAIN_EDGE_FALLOFF)
    return MOUNTAIN_BASE_HEIGHT + edge_factor * MOUNTAIN_EDGE_RANGE + rng * MOUNTAIN_HEIGHT_VARIANCE


def classify_tile(gx: int, gz: int, biome: str, is_river: bool, size: int = GRID) -> TileRecord:
    """Classify one grid cell.

    Args:
        gx, gz: Grid coordinates
        biome: Biome governing the cell
        is_river: River membership overrides the biome entirely
        size: Grid side length (mountain heights depend on edge distance)

    Returns:
        TileRecord for the cell. Unknown biomes come back as plain grass.
    """
    rng = pseudo_random(gx, gz)

    if is_river:
        return TileRecord(
            type=TileType.WATER,
            height=WATER_HEIGHT,
            color=_shade(rng, "water", "waterDeep"),
            biome=biome,
            transparent=True,
            opacity=WATER_OPACITY,
        )

    if biome in _LOWLAND_SHADES:
        tile_type = BIOME_TYPES[biome].tile_type
        primary, alternate = _LOWLAND_SHADES[biome]
        if tile_type == TileType.SAND:
            height = SAND_BASE_HEIGHT + rng * SAND_HEIGHT_VARIANCE
        else:
            height = GRASS_BASE_HEIGHT + rng * GRASS_HEIGHT_VARIANCE
        return TileRecord(tile_type, height, _shade(rng, primary, alternate), biome)

    if biome == "mountain":
        peak = edge_distance(gx, gz, size) <= MOUNTAIN_PEAK_RING
        return TileRecord(
            type=TileType.MOUNTAIN_PEAK if peak else TileType.MOUNTAIN,
            height=mountain_height(gx, gz, rng, size),
            color=_shade(rng, "mountainStone", "mountainStoneAlt"),
            biome=biome,
        )

    # Fallback: plain grass
    return TileRecord(TileType.GRASS, DEFAULT_TILE_HEIGHT, PALETTE["grass"], biome)
