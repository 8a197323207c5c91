# config.py
"""
Centralized world configuration.

This file contains high-level, cross-cutting constants used by world
generation, site allocation and decoration. Render-only constants (colors of
decoration parts, primitive dimensions) live in render/config.py.
"""
from __future__ import annotations

from typing import Dict, Tuple

# =============================================================================
# GRID
# =============================================================================
# Square tile grid. Grid-space runs 0..GRID-1, world-space is gx - HALF,
# so a 28 grid spans -14..13 on both axes.
GRID = 28
HALF = GRID // 2

BIOME_LIST: Tuple[str, ...] = ("meadow", "forest", "desert", "mountain")
UNKNOWN_BIOME = "unknown"

# =============================================================================
# REGION PARTITION
# =============================================================================
TRANSITION_WIDTH = 2            # Tiles of blend either side of a quadrant midline
TRANSITION_NOISE_SPREAD = 1.5   # Noise is centred then scaled by this
TRANSITION_JITTER = 0.3         # Tiles of positional jitter per unit of noise

# =============================================================================
# RIVER & BRIDGE
# =============================================================================
RIVER_START_MIN = 4             # Start column is drawn from 4..7
RIVER_START_SPAN = 4
RIVER_WAVE_FREQUENCY = 0.35
RIVER_WAVE_AMPLITUDE = 2.5
RIVER_DRIFT = 0.4               # Columns per row, toward high gx
RIVER_JITTER = 1.5
RIVER_WIDE_THRESHOLD = 0.6      # noise above this widens a row to 3 tiles

BRIDGE_BAND: Tuple[float, float] = (0.35, 0.65)  # Fraction of GRID rows, [lo, hi)
BRIDGE_MARGIN = 3               # Deck width = river span + margin
BRIDGE_PATH_OVERHANG = 1        # Path tiles extend this far past the river

# =============================================================================
# TILE HEIGHTS
# =============================================================================
WATER_HEIGHT = 0.08
WATER_OPACITY = 0.78
DEFAULT_TILE_HEIGHT = 0.15      # Unknown biomes and heightAt() fallback

GRASS_BASE_HEIGHT = 0.12
GRASS_HEIGHT_VARIANCE = 0.06
SAND_BASE_HEIGHT = 0.10
SAND_HEIGHT_VARIANCE = 0.04

MOUNTAIN_BASE_HEIGHT = 0.25
MOUNTAIN_EDGE_RANGE = 1.1
MOUNTAIN_HEIGHT_VARIANCE = 0.15
MOUNTAIN_EDGE_FALLOFF = 6       # Edge factor reaches 0 this many tiles in
MOUNTAIN_PEAK_RING = 2          # edgeDistance <= this is a peak

# =============================================================================
# SITE ALLOCATION
# =============================================================================
SITE_MARGIN = 3                 # Candidates keep this far from every edge
SITE_SPACING = 5                # Reject candidates within this Chebyshev distance
SITE_TILE_TYPES: Tuple[str, ...] = ("grass", "sand")

# =============================================================================
# DECORATION
# =============================================================================
DECORATION_CHANCE: Dict[str, float] = {
    "meadow": 0.05,
    "forest": 0.15,
    "desert": 0.08,
    "mountain": 0.12,
}
DECORATION_EDGE_CLEARANCE = 2   # Rings kept clear of trees
