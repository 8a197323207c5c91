# render/config.py
"""
Configuration constants for the render domain.
Includes primitive dimensions and the colour classes of decoration parts.
"""
from __future__ import annotations

from typing import Tuple

from world.terrain import PALETTE

# =============================================================================
# TILES
# =============================================================================
TILE_SIZE = 1.0
WATER_SEGMENTS = 8                    # Water planes are subdivided for ripples

SNOW_CAP_SIZE = 0.8
SNOW_CAP_THICKNESS = 0.06

# =============================================================================
# BRIDGE
# =============================================================================
BRIDGE_THICKNESS = 0.12
BRIDGE_DEPTH = 1.2
BRIDGE_DECK_HEIGHT = 0.16

# =============================================================================
# DECORATIONS
# =============================================================================
# Wildflower
WILDFLOWER_RADIUS = 0.03
WILDFLOWER_SEGMENTS: Tuple[int, int] = (5, 4)
WILDFLOWER_COLORS: Tuple[int, ...] = (
    PALETTE["wildflower1"],
    PALETTE["wildflower2"],
    PALETTE["wildflower3"],
)

# Tree (cylinder trunk + cone canopy)
TRUNK_RADII: Tuple[float, float] = (0.06, 0.08)   # top, bottom
TRUNK_SEGMENTS = 6
CANOPY_SEGMENTS = 10
LEAF_COLORS: Tuple[int, ...] = (PALETTE["treeLeaves"], PALETTE["treeLeavesAlt"])
CANOPY_OVERLAP = 0.05                 # Canopy sinks this far onto the trunk

# Rock formation pieces
ROCK_PIECE_SPREAD = 0.4
ROCK_PIECE_STACK = 0.04

# Boulder
BOULDER_SNOW_SCALE = 0.7
BOULDER_SNOW_THICKNESS = 0.03
