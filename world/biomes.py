# world/biomes.py
"""
Biome assignment and lookup.

The map is split into four quadrants and each gets one biome. Near the
quadrant midlines the lookup position is jittered by per-cell noise so the
boundary reads as an organic edge instead of a straight seam.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from config import (
    BIOME_LIST,
    GRID,
    TRANSITION_JITTER,
    TRANSITION_NOISE_SPREAD,
    TRANSITION_WIDTH,
)
from utils import round_half_up
from world.noise import centered_noise


@dataclass(frozen=True)
class BiomeType:
    """Static properties of a biome.

    The glyph is only used for text dumps of the map (debug).
    """
    name: str
    char: str
    tile_type: str
    buildable: bool


BIOME_TYPES: Dict[str, BiomeType] = {
    "meadow": BiomeType("meadow", ",", "grass", buildable=True),
    "forest": BiomeType("forest", "f", "grass", buildable=True),
    "desert": BiomeType("desert", ".", "sand", buildable=True),
    "mountain": BiomeType("mountain", "^", "mountain", buildable=False),
}


def assign_biomes(rng: Optional[random.Random] = None) -> List[str]:
    """Shuffle the four biomes into the four quadrants.

    Quadrants: 0=low-gx/low-gz, 1=high-gx/low-gz, 2=low-gx/high-gz,
    3=high-gx/high-gz.

    Args:
        rng: Generator to draw from. Pass a seeded one for a reproducible
            world; None uses the module-level random source.

    Returns:
        List of 4 biome names indexed by quadrant
    """
    rng = rng or random
    biomes = list(BIOME_LIST)
    rng.shuffle(biomes)
    return biomes


def quadrant_index(gx: float, gz: float, size: int = GRID) -> int:
    """Quadrant (0-3) containing a grid position, by midline comparison."""
    half = size / 2
    col = 0 if gx < half else 1
    row = 0 if gz < half else 1
    return row * 2 + col


def distance_to_midline(gx: int, gz: int, size: int = GRID) -> float:
    """Distance from a cell centre to the closer of the two quadrant midlines."""
    half = size / 2
    return min(abs(gx - half + 0.5), abs(gz - half + 0.5))


def biome_at(gx: int, gz: int, assignment: Sequence[str], size: int = GRID) -> str:
    """Biome governing a grid cell, with noisy blending near quadrant edges.

    Outside the transition band this is a direct quadrant lookup. Inside it,
    the position is nudged diagonally by per-cell noise and the quadrant is
    re-resolved at the nudged position.
    """
    if distance_to_midline(gx, gz, size) > TRANSITION_WIDTH:
        return assignment[quadrant_index(gx, gz, size)]

    jitter = centered_noise(gx * 3, gz * 7, TRANSITION_NOISE_SPREAD) * TRANSITION_JITTER
    adjusted_gx = round_half_up(gx + jitter)
    adjusted_gz = round_half_up(gz + jitter)
    return assignment[quadrant_index(adjusted_gx, adjusted_gz, size)]
