# utils.py
"""
utils.py - Common utility functions

Provides shared, stateless helper functions used across the world and render
modules.
"""
from __future__ import annotations

import math
from typing import Tuple

from config import GRID

Point = Tuple[int, int]


# =============================================================================
# Grid Bounds
# =============================================================================

def in_grid(gx: int, gz: int, size: int = GRID) -> bool:
    """Check whether a grid-space coordinate lies on the map."""
    return 0 <= gx < size and 0 <= gz < size


def edge_distance(gx: int, gz: int, size: int = GRID) -> int:
    """Number of rings between a grid cell and the nearest map edge.

    Example: on a 28 grid, (0, 5) -> 0 and (3, 10) -> 3
    """
    return min(gx, gz, size - 1 - gx, size - 1 - gz)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def clamp(val: float, low: float, high: float) -> float:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


# =============================================================================
# Distance Utilities
# =============================================================================

def chebyshev_distance(p1: Point, p2: Point) -> int:
    """Chebyshev (chessboard) distance between two points.

    Max of horizontal and vertical distance.

    Example: (0,0) to (3,2) -> 3
    """
    return max(abs(p1[0] - p2[0]), abs(p1[1] - p2[1]))

