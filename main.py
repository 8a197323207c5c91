# main.py
"""
Tile world generator - command line entry point.

Generates a world, places a number of structures, scatters decorations,
batches the static geometry and prints a text map plus summary statistics.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from world.biomes import BIOME_TYPES
from world_state import WorldState

WATER_CHAR = "~"
PATH_CHAR = "="
OCCUPIED_CHAR = "#"
DECORATION_CHAR = "*"


def render_text_map(state: WorldState) -> List[str]:
    """One line per grid row (gz), one character per tile (gx)."""
    grid = state.grid
    decorated = {d.anchor for d in state.decorations}
    lines = []
    for gz in range(grid.size):
        row = []
        for gx in range(grid.size):
            x, z = gx - grid.half, gz - grid.half
            tile = grid.cell(gx, gz)
            if grid.path_mask[gx, gz]:
                row.append(PATH_CHAR)
            elif tile.is_water:
                row.append(WATER_CHAR)
            elif state.sites.occupied[gx, gz]:
                row.append(OCCUPIED_CHAR)
            elif (x, z) in decorated:
                row.append(DECORATION_CHAR)
            else:
                biome = BIOME_TYPES.get(tile.biome)
                row.append(biome.char if biome else "?")
        lines.append("".join(row))
    return lines


def summarize(state: WorldState) -> List[str]:
    grid = state.grid
    lines = [
        f"Seed: {state.seed if state.seed is not None else 'random'}",
        f"Quadrants: {', '.join(grid.assignment)}",
        f"Tiles: {len(grid)}  water: {len(grid.water_tiles())}",
    ]
    if grid.bridge is not None:
        lines.append(f"Bridge: row {grid.bridge.row}, columns {grid.bridge.min_col}-{grid.bridge.max_col}")
    else:
        lines.append("Bridge: none")

    for placement in state.sites.placements:
        lines.append(f"Structure at ({placement.x}, {placement.z}) in {placement.biome}")
    lines.append(f"Decorations: {len(state.decorations)}")

    if state.batch is not None:
        batch = state.batch
        lines.append(
            f"Static primitives: {len(batch.originals)} -> {len(batch.groups)} batches "
            f"({batch.original_vertex_count()} vertices, {len(batch.water)} water planes)"
        )
    return lines


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a procedural tile world.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible world")
    parser.add_argument("--structures", type=int, default=6, help="Structures to place (default: 6)")
    parser.add_argument("--no-decorations", action="store_true", help="Skip the decoration pass")
    parser.add_argument("--no-batch", action="store_true", help="Skip static geometry batching")
    parser.add_argument("--no-map", action="store_true", help="Only print the summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = WorldState.create(seed=args.seed)
    state.place_structures(max(0, args.structures))
    if not args.no_decorations:
        state.add_decorations()
    if not args.no_batch:
        state.batch_static()

    if not args.no_map:
        print("\n".join(render_text_map(state)))
        print()
    print("\n".join(summarize(state)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
