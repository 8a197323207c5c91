# world/river.py
"""
River path generation and bridge placement.

The river runs the full length of the map along gz, one 2-3 tile run per row,
meandering on a sine wave while drifting toward high gx. The bridge goes at
the narrowest crossing in the central band of rows.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from config import (
    BRIDGE_BAND,
    BRIDGE_MARGIN,
    GRID,
    RIVER_DRIFT,
    RIVER_JITTER,
    RIVER_START_MIN,
    RIVER_START_SPAN,
    RIVER_WAVE_AMPLITUDE,
    RIVER_WAVE_FREQUENCY,
    RIVER_WIDE_THRESHOLD,
)
from utils import clamp, round_half_up
from world.noise import centered_noise, pseudo_random

Point = Tuple[int, int]


class BridgeSite(NamedTuple):
    """Row of the crossing and the river's column extent on that row."""
    row: int
    min_col: int
    max_col: int

    @property
    def span(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def deck_width(self) -> int:
        return self.span - 1 + BRIDGE_MARGIN


@dataclass
class River:
    """Ordered river tiles in grid-space, generated row by row."""
    tiles: List[Point]

    def __post_init__(self) -> None:
        self._members = set(self.tiles)

    def __contains__(self, cell: Point) -> bool:
        return cell in self._members

    def __len__(self) -> int:
        return len(self.tiles)

    def row(self, gz: int) -> List[int]:
        """Columns of river tiles on a row, in generation order."""
        return [gx for gx, z in self.tiles if z == gz]


def river_start_column(rng: Optional[random.Random] = None) -> int:
    """Draw the column the river starts from (4-7 on the default grid)."""
    rng = rng or random
    return RIVER_START_MIN + rng.randrange(RIVER_START_SPAN)


def river_centerline(gz: int, start: int) -> int:
    """Leftmost river column on row gz before clamping."""
    wave = math.sin(gz * RIVER_WAVE_FREQUENCY) * RIVER_WAVE_AMPLITUDE
    drift = gz * RIVER_DRIFT
    jitter = centered_noise(gz * 5, 42, RIVER_JITTER)
    return round_half_up(start + wave + drift + jitter)


def generate_river_path(rng: Optional[random.Random] = None, size: int = GRID) -> River:
    """Walk every row and lay down a 2-3 tile run of river.

    Runs that meander past the map edge are clamped onto it, so every row keeps
    at least one tile and the river is never broken.

    Args:
        rng: Generator for the start column. Pass a seeded one for a
            reproducible river; None uses the module-level random source.
        size: Grid side length

    Returns:
        River with tiles ordered by row, then by column offset
    """
    start = river_start_column(rng)
    tiles: List[Point] = []
    seen = set()

    for gz in range(size):
        x = river_centerline(gz, start)
        width = 3 if pseudo_random(x, gz) > RIVER_WIDE_THRESHOLD else 2
        for dx in range(width):
            cell = (int(clamp(x + dx, 0, size - 1)), gz)
            if cell not in seen:
                seen.add(cell)
                tiles.append(cell)

    return River(tiles)


def bridge_band(size: int = GRID) -> range:
    """Rows eligible for the bridge: [floor(0.35 size), floor(0.65 size))."""
    lo, hi = BRIDGE_BAND
    return range(math.floor(size * lo), math.floor(size * hi))


def find_bridge_location(river: River, size: int = GRID) -> Optional[BridgeSite]:
    """Pick the narrowest river crossing inside the central band.

    Rows are scanned in ascending order and only a strictly narrower span
    replaces the current best, so the first row found wins a tie.

    Returns:
        BridgeSite, or None when the river never enters the band
    """
    best: Optional[BridgeSite] = None
    for gz in bridge_band(size):
        cols = river.row(gz)
        if not cols:
            continue
        candidate = BridgeSite(gz, min(cols), max(cols))
        if best is None or candidate.span < best.span:
            best = candidate
    return best
