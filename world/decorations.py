# world/decorations.py
"""
Decoration scattering.

Runs once, after building sites have settled, and dresses free land tiles
with small biome-specific props: wildflowers in meadows, trees in forests,
rock formations in deserts and boulders on the mountain slopes. Every roll
and every variant comes from the per-cell noise, so the same grid and
occupancy always produce the same decorations.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from config import DECORATION_CHANCE, DECORATION_EDGE_CLEARANCE
from utils import chebyshev_distance, edge_distance
from world.grid import WorldGrid
from world.noise import centered_noise, pseudo_random
from world.terrain import TileType

logger = logging.getLogger(__name__)


class DecorationKind:
    WILDFLOWER = "wildflower"
    TREE = "tree"
    ROCK_FORMATION = "rock_formation"
    BOULDER = "boulder"


BIOME_DECORATIONS: Dict[str, str] = {
    "meadow": DecorationKind.WILDFLOWER,
    "forest": DecorationKind.TREE,
    "desert": DecorationKind.ROCK_FORMATION,
    "mountain": DecorationKind.BOULDER,
}

# Kinds kept out of the outer rings, which stay clear for future structures
EDGE_CLEAR_KINDS = (DecorationKind.TREE,)

WILDFLOWER_VARIANTS = 3
WILDFLOWER_SPREAD = 0.6


@dataclass(frozen=True)
class Decoration:
    """A prop anchored to one tile.

    Attributes:
        kind: One of DecorationKind
        x, z: Anchor tile in world coordinates
        offset: Sub-tile (dx, dz) placement from the tile centre
        variant: Kind-specific variant index (colour, piece count, snow)
    """
    kind: str
    x: int
    z: int
    offset: Tuple[float, float]
    variant: int

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.x, self.z


def decoration_roll(gx: int, gz: int) -> float:
    """Per-cell probability draw, independent of the tile's own shade."""
    return pseudo_random(gx * 13, gz * 17)


def choose_variant(kind: str, gx: int, gz: int) -> Tuple[int, Tuple[float, float]]:
    """Pick the (variant, offset) of a decoration from a second noise draw."""
    if kind == DecorationKind.WILDFLOWER:
        variant = int(pseudo_random(gx + 1, gz + 2) * WILDFLOWER_VARIANTS)
        offset = (
            centered_noise(gx + 5, gz, WILDFLOWER_SPREAD),
            centered_noise(gx, gz + 5, WILDFLOWER_SPREAD),
        )
        return variant, offset
    if kind == DecorationKind.TREE:
        # 0 = main leaf colour, 1 = alternate
        return (0 if pseudo_random(gx * 3, gz * 3) > 0.5 else 1), (0.0, 0.0)
    if kind == DecorationKind.ROCK_FORMATION:
        # Piece count
        return (3 if pseudo_random(gx + 7, gz + 11) > 0.5 else 2), (0.0, 0.0)
    # Boulder: 1 = snow dusting on top
    return (1 if pseudo_random(gx + 23, gz + 31) > 0.6 else 0), (0.0, 0.0)


def scatter_decorations(grid: WorldGrid, occupied: Optional[np.ndarray] = None) -> List[Decoration]:
    """Roll a decoration for every free land tile.

    Args:
        grid: World grid to dress
        occupied: [gx, gz] mask of tiles reserved by structures

    Returns:
        Decorations in generation order (gx outer, gz inner)
    """
    if occupied is None:
        occupied = np.zeros((grid.size, grid.size), dtype=bool)

    decorations: List[Decoration] = []
    half = grid.half
    for gx, gz, tile in grid.cells():
        if occupied[gx, gz] or tile.is_water:
            continue

        kind = BIOME_DECORATIONS.get(tile.biome)
        if kind is None:
            continue
        if decoration_roll(gx, gz) >= DECORATION_CHANCE[tile.biome]:
            continue
        if kind == DecorationKind.BOULDER and tile.type == TileType.MOUNTAIN_PEAK:
            continue
        if kind in EDGE_CLEAR_KINDS and edge_distance(gx, gz, grid.size) < DECORATION_EDGE_CLEARANCE:
            continue

        variant, offset = choose_variant(kind, gx, gz)
        decorations.append(Decoration(kind, gx - half, gz - half, offset, variant))

    logger.debug("Scattered %d decorations", len(decorations))
    return decorations


def decorations_near(decorations: Iterable[Decoration], x: int, z: int, radius: int) -> List[Decoration]:
    """Decorations whose anchor tile is within radius (Chebyshev) of (x, z)."""
    return [d for d in decorations if chebyshev_distance(d.anchor, (x, z)) <= radius]
