# render/scene.py
"""Primitive construction for tiles, the bridge and decorations.

Turns the world model into Mesh descriptors with world transforms:
- One box per land tile (plus a snow cap on mountain peaks)
- One subdivided, animated plane per water tile
- One deck box for the bridge
- A handful of parts per decoration (tree, rocks, boulder, flower)

Part shapes are derived from the same per-cell noise as the world, so a
given world always yields the same scene.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from render.config import (
    BOULDER_SNOW_SCALE,
    BOULDER_SNOW_THICKNESS,
    BRIDGE_DECK_HEIGHT,
    BRIDGE_DEPTH,
    BRIDGE_THICKNESS,
    CANOPY_OVERLAP,
    CANOPY_SEGMENTS,
    LEAF_COLORS,
    ROCK_PIECE_SPREAD,
    ROCK_PIECE_STACK,
    SNOW_CAP_SIZE,
    SNOW_CAP_THICKNESS,
    TILE_SIZE,
    TRUNK_RADII,
    TRUNK_SEGMENTS,
    WATER_SEGMENTS,
    WILDFLOWER_COLORS,
    WILDFLOWER_RADIUS,
    WILDFLOWER_SEGMENTS,
)
from render.geometry import (
    Material,
    Mesh,
    box_geometry,
    compose_matrix,
    cone_geometry,
    cylinder_geometry,
    plane_geometry,
    sphere_geometry,
)
from world.decorations import Decoration, DecorationKind
from world.grid import WorldGrid
from world.noise import centered_noise, pseudo_random
from world.river import BridgeSite
from world.terrain import PALETTE, TileRecord, TileType


@dataclass
class StaticScene:
    """Every primitive of a world, split the way the batcher consumes it."""
    terrain: List[Mesh] = field(default_factory=list)
    decorations: List[Mesh] = field(default_factory=list)

    def meshes(self) -> List[Mesh]:
        return self.terrain + self.decorations

    def water(self) -> List[Mesh]:
        return [m for m in self.terrain if m.animated]

    def static(self) -> List[Mesh]:
        return [m for m in self.meshes() if not m.animated]


# =============================================================================
# Tiles & bridge
# =============================================================================

def tile_meshes(tile: TileRecord, gx: int, gz: int, half: int) -> List[Mesh]:
    """Primitives for one tile: a water plane, or a box plus optional snow cap."""
    wx, wz = gx - half, gz - half
    tag = {"tile_type": tile.type, "biome": tile.biome, "gx": gx, "gz": gz}

    if tile.is_water:
        return [Mesh(
            plane_geometry(TILE_SIZE, TILE_SIZE, WATER_SEGMENTS, WATER_SEGMENTS),
            Material(tile.color, transparent=True, opacity=tile.opacity),
            compose_matrix((wx, tile.height, wz), rotation=(-math.pi / 2, 0.0, 0.0)),
            animated=True,
            tag=tag,
        )]

    tile_matrix = compose_matrix((wx, tile.height / 2, wz))
    meshes = [Mesh(
        box_geometry(TILE_SIZE, tile.height, TILE_SIZE),
        Material(tile.color),
        tile_matrix,
        receive_shadow=True,
        tag=tag,
    )]
    if tile.type == TileType.MOUNTAIN_PEAK:
        cap_offset = compose_matrix((0.0, tile.height / 2 + SNOW_CAP_THICKNESS / 2, 0.0))
        meshes.append(Mesh(
            box_geometry(SNOW_CAP_SIZE, SNOW_CAP_THICKNESS, SNOW_CAP_SIZE),
            Material(PALETTE["snow"]),
            tile_matrix @ cap_offset,
            receive_shadow=True,
            tag={"tile_type": "snow_cap", "gx": gx, "gz": gz},
        ))
    return meshes


def bridge_mesh(bridge: BridgeSite, half: int) -> Mesh:
    """Deck box spanning the river plus a tile of margin each side."""
    wx = (bridge.min_col + bridge.max_col) / 2 - half
    wz = bridge.row - half
    return Mesh(
        box_geometry(bridge.deck_width, BRIDGE_THICKNESS, BRIDGE_DEPTH),
        Material(PALETTE["path"]),
        compose_matrix((wx, BRIDGE_DECK_HEIGHT, wz)),
        cast_shadow=True,
        receive_shadow=True,
        tag={"tile_type": TileType.BRIDGE, "row": bridge.row},
    )


def build_terrain_meshes(grid: WorldGrid) -> List[Mesh]:
    meshes: List[Mesh] = []
    for gx, gz, tile in grid.cells():
        meshes.extend(tile_meshes(tile, gx, gz, grid.half))
    if grid.bridge is not None:
        meshes.append(bridge_mesh(grid.bridge, grid.half))
    return meshes


# =============================================================================
# Decorations
# =============================================================================

def _solid(geometry, color: int, matrix: np.ndarray, kind: str, shadows: bool = True) -> Mesh:
    return Mesh(geometry, Material(color), matrix,
                cast_shadow=shadows, receive_shadow=shadows, tag={"decoration": kind})


def wildflower_meshes(decoration: Decoration, ground: float) -> List[Mesh]:
    ox, oz = decoration.offset
    position = (decoration.x + ox, ground + WILDFLOWER_RADIUS, decoration.z + oz)
    return [_solid(
        sphere_geometry(WILDFLOWER_RADIUS, *WILDFLOWER_SEGMENTS),
        WILDFLOWER_COLORS[decoration.variant % len(WILDFLOWER_COLORS)],
        compose_matrix(position),
        decoration.kind,
        shadows=False,
    )]


def tree_meshes(decoration: Decoration, ground: float, gx: int, gz: int) -> List[Mesh]:
    """Cylinder trunk and cone canopy, sized and turned by noise."""
    rng = pseudo_random(gx + 11, gz + 13)
    root = compose_matrix((decoration.x, ground, decoration.z), rotation=(0.0, rng * math.pi * 2, 0.0))

    trunk_height = 0.3 + rng * 0.15
    canopy_height = 0.4 + rng * 0.15
    canopy_radius = 0.2 + rng * 0.08
    leaf_color = LEAF_COLORS[decoration.variant % len(LEAF_COLORS)]

    trunk = _solid(
        cylinder_geometry(TRUNK_RADII[0], TRUNK_RADII[1], trunk_height, TRUNK_SEGMENTS),
        PALETTE["treeTrunk"],
        root @ compose_matrix((0.0, trunk_height / 2, 0.0)),
        decoration.kind,
    )
    canopy = _solid(
        cone_geometry(canopy_radius, canopy_height, CANOPY_SEGMENTS),
        leaf_color,
        root @ compose_matrix((0.0, trunk_height + canopy_height / 2 - CANOPY_OVERLAP, 0.0)),
        decoration.kind,
    )
    return [trunk, canopy]


def rock_formation_meshes(decoration: Decoration, ground: float, gx: int, gz: int) -> List[Mesh]:
    """2-3 small tilted boxes loosely stacked around the tile centre."""
    root = compose_matrix((decoration.x, ground, decoration.z))
    meshes = []
    for i in range(decoration.variant):
        rng = pseudo_random(gx + i * 5, gz + i * 3)
        sx, sy, sz = 0.08 + rng * 0.12, 0.06 + rng * 0.10, 0.08 + rng * 0.10
        local = compose_matrix(
            (centered_noise(gx + i, gz, ROCK_PIECE_SPREAD), sy / 2 + i * ROCK_PIECE_STACK,
             centered_noise(gx, gz + i, ROCK_PIECE_SPREAD)),
            rotation=((rng - 0.5) * 0.4, rng * math.pi, (rng - 0.5) * 0.3),
        )
        meshes.append(_solid(box_geometry(sx, sy, sz), PALETTE["rock"], root @ local, decoration.kind))
    return meshes


def boulder_meshes(decoration: Decoration, ground: float, gx: int, gz: int) -> List[Mesh]:
    """One large rock, with a snow dusting on variant 1."""
    rng = pseudo_random(gx + 23, gz + 31)
    root = compose_matrix((decoration.x, ground, decoration.z))
    sx, sy, sz = 0.2 + rng * 0.25, 0.15 + rng * 0.3, 0.18 + rng * 0.2

    color = PALETTE["mountainStone"] if rng > 0.5 else PALETTE["stone"]
    rock_matrix = root @ compose_matrix(
        (0.0, sy / 2, 0.0),
        rotation=((rng - 0.5) * 0.3, rng * math.pi * 2, (rng - 0.5) * 0.2),
    )
    meshes = [_solid(box_geometry(sx, sy, sz), color, rock_matrix, decoration.kind)]

    if decoration.variant == 1:
        snow_matrix = root @ compose_matrix((0.0, sy + 0.01, 0.0))
        meshes.append(_solid(
            box_geometry(sx * BOULDER_SNOW_SCALE, BOULDER_SNOW_THICKNESS, sz * BOULDER_SNOW_SCALE),
            PALETTE["snow"],
            snow_matrix,
            decoration.kind,
            shadows=False,
        ))
    return meshes


def decoration_meshes(decoration: Decoration, grid: WorldGrid) -> List[Mesh]:
    ground = grid.height_at(decoration.x, decoration.z)
    gx, gz = decoration.x + grid.half, decoration.z + grid.half
    if decoration.kind == DecorationKind.WILDFLOWER:
        return wildflower_meshes(decoration, ground)
    if decoration.kind == DecorationKind.TREE:
        return tree_meshes(decoration, ground, gx, gz)
    if decoration.kind == DecorationKind.ROCK_FORMATION:
        return rock_formation_meshes(decoration, ground, gx, gz)
    if decoration.kind == DecorationKind.BOULDER:
        return boulder_meshes(decoration, ground, gx, gz)
    return []


def build_scene(grid: WorldGrid, decorations: Optional[List[Decoration]] = None) -> StaticScene:
    """Build every primitive for a world and its decorations."""
    scene = StaticScene(terrain=build_terrain_meshes(grid))
    for decoration in decorations or []:
        scene.decorations.extend(decoration_meshes(decoration, grid))
    return scene
