# render/geometry.py
"""Geometry descriptors: vertex/index buffers, materials and transforms.

Everything here is plain NumPy data for a display adapter to upload. Shapes
follow the usual y-up conventions: boxes and cylinders are centred on the
origin, planes lie in XY facing +z.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class Material:
    """Surface description shared by primitives."""
    color: int
    emissive: int = 0
    emissive_intensity: float = 0.0
    transparent: bool = False
    opacity: float = 1.0


@dataclass
class Geometry:
    """Triangle mesh buffers.

    Attributes:
        positions: (N, 3) float32 vertex positions
        indices: (M, 3) int32 triangle vertex indices
    """
    positions: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0])

    def transformed(self, matrix: np.ndarray) -> "Geometry":
        """Copy of this geometry with matrix baked into the positions."""
        return Geometry(apply_matrix(self.positions, matrix), self.indices.copy())


@dataclass(eq=False)
class Mesh:
    """A drawable primitive: geometry, material and world transform.

    Meshes compare by identity so they can be tracked in sets.
    """
    geometry: Geometry
    material: Material
    matrix: np.ndarray = field(default_factory=lambda: np.eye(4))
    cast_shadow: bool = False
    receive_shadow: bool = False
    animated: bool = False
    visible: bool = True
    tag: Dict[str, object] = field(default_factory=dict)

    def world_geometry(self) -> Geometry:
        return self.geometry.transformed(self.matrix)


# =============================================================================
# Transforms
# =============================================================================

def compose_matrix(position: Vec3 = (0.0, 0.0, 0.0),
                   rotation: Vec3 = (0.0, 0.0, 0.0),
                   scale: Vec3 = (1.0, 1.0, 1.0)) -> np.ndarray:
    """4x4 transform: translate * rotate (Euler XYZ) * scale."""
    rx, ry, rz = rotation
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])

    matrix = np.eye(4)
    matrix[:3, :3] = rot_x @ rot_y @ rot_z @ np.diag(scale)
    matrix[:3, 3] = position
    return matrix


def apply_matrix(positions: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Transform (N, 3) positions by a 4x4 affine matrix."""
    return (positions @ matrix[:3, :3].T + matrix[:3, 3]).astype(np.float32)


# =============================================================================
# Shape builders
# =============================================================================

def _geometry(vertices: Iterable[Sequence[float]], triangles: Iterable[Sequence[int]]) -> Geometry:
    return Geometry(
        np.asarray(list(vertices), dtype=np.float32).reshape(-1, 3),
        np.asarray(list(triangles), dtype=np.int32).reshape(-1, 3),
    )


def box_geometry(width: float, height: float, depth: float) -> Geometry:
    """Axis-aligned box centred on the origin (8 vertices, 12 triangles)."""
    hx, hy, hz = width / 2, height / 2, depth / 2
    vertices = [
        (-hx, -hy, -hz), (hx, -hy, -hz), (hx, hy, -hz), (-hx, hy, -hz),
        (-hx, -hy, hz), (hx, -hy, hz), (hx, hy, hz), (-hx, hy, hz),
    ]
    triangles = [
        (0, 2, 1), (0, 3, 2),   # back
        (4, 5, 6), (4, 6, 7),   # front
        (0, 4, 7), (0, 7, 3),   # left
        (1, 2, 6), (1, 6, 5),   # right
        (3, 7, 6), (3, 6, 2),   # top
        (0, 1, 5), (0, 5, 4),   # bottom
    ]
    return _geometry(vertices, triangles)


def plane_geometry(width: float, height: float, width_segments: int = 1, height_segments: int = 1) -> Geometry:
    """Subdivided plane in XY, centred on the origin."""
    xs = np.linspace(-width / 2, width / 2, width_segments + 1)
    ys = np.linspace(height / 2, -height / 2, height_segments + 1)
    vertices = [(x, y, 0.0) for y in ys for x in xs]

    row = width_segments + 1
    triangles = []
    for iy in range(height_segments):
        for ix in range(width_segments):
            a = iy * row + ix
            b = a + row
            triangles.append((a, b, a + 1))
            triangles.append((b, b + 1, a + 1))
    return _geometry(vertices, triangles)


def cylinder_geometry(radius_top: float, radius_bottom: float, height: float, radial_segments: int) -> Geometry:
    """Capped cylinder along y, centred on the origin. radius_top=0 gives a cone."""
    half = height / 2
    vertices = []
    for i in range(radial_segments):
        theta = 2 * math.pi * i / radial_segments
        vertices.append((radius_top * math.sin(theta), half, radius_top * math.cos(theta)))
    for i in range(radial_segments):
        theta = 2 * math.pi * i / radial_segments
        vertices.append((radius_bottom * math.sin(theta), -half, radius_bottom * math.cos(theta)))
    top_centre = len(vertices)
    vertices.append((0.0, half, 0.0))
    bottom_centre = len(vertices)
    vertices.append((0.0, -half, 0.0))

    triangles = []
    for i in range(radial_segments):
        j = (i + 1) % radial_segments
        top_i, top_j = i, j
        bot_i, bot_j = radial_segments + i, radial_segments + j
        triangles.append((top_i, bot_i, top_j))
        triangles.append((bot_i, bot_j, top_j))
        triangles.append((top_centre, top_i, top_j))
        triangles.append((bottom_centre, bot_j, bot_i))
    return _geometry(vertices, triangles)


def cone_geometry(radius: float, height: float, radial_segments: int) -> Geometry:
    return cylinder_geometry(0.0, radius, height, radial_segments)


def sphere_geometry(radius: float, width_segments: int, height_segments: int) -> Geometry:
    """UV sphere centred on the origin. Poles collapse to degenerate-free fans."""
    vertices = []
    for iy in range(height_segments + 1):
        phi = math.pi * iy / height_segments
        for ix in range(width_segments + 1):
            theta = 2 * math.pi * ix / width_segments
            vertices.append((
                -radius * math.cos(theta) * math.sin(phi),
                radius * math.cos(phi),
                radius * math.sin(theta) * math.sin(phi),
            ))

    row = width_segments + 1
    triangles = []
    for iy in range(height_segments):
        for ix in range(width_segments):
            a = iy * row + ix + 1
            b = iy * row + ix
            c = (iy + 1) * row + ix
            d = (iy + 1) * row + ix + 1
            if iy != 0:
                triangles.append((a, b, d))
            if iy != height_segments - 1:
                triangles.append((b, c, d))
    return _geometry(vertices, triangles)


def merge_geometries(geometries: Sequence[Geometry]) -> Geometry:
    """Concatenate geometries into one buffer pair, re-basing the indices."""
    if not geometries:
        return Geometry(np.zeros((0, 3), dtype=np.float32), np.zeros((0, 3), dtype=np.int32))
    offsets = np.cumsum([0] + [g.vertex_count for g in geometries[:-1]])
    positions = np.concatenate([g.positions for g in geometries]).astype(np.float32)
    indices = np.concatenate([g.indices + offset for g, offset in zip(geometries, offsets)]).astype(np.int32)
    return Geometry(positions, indices)
