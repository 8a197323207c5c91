# render/__init__.py
"""
Render descriptors for the world model.

Provides geometry buffers and transforms, scene primitive construction and
static geometry batching. Nothing here draws pixels; a display adapter turns
these descriptors into draw calls.
"""
from render.geometry import (
    Geometry,
    Material,
    Mesh,
    box_geometry,
    compose_matrix,
    cone_geometry,
    cylinder_geometry,
    merge_geometries,
    plane_geometry,
    sphere_geometry,
)
from render.scene import StaticScene, build_scene
from render.batching import (
    MODE_BATCHED,
    MODE_ORIGINAL,
    BatchGroup,
    StaticBatch,
    batch_static,
    material_key,
)

__all__ = [
    # Geometry
    "Geometry",
    "Material",
    "Mesh",
    "box_geometry",
    "compose_matrix",
    "cone_geometry",
    "cylinder_geometry",
    "merge_geometries",
    "plane_geometry",
    "sphere_geometry",
    # Scene
    "StaticScene",
    "build_scene",
    # Batching
    "MODE_BATCHED",
    "MODE_ORIGINAL",
    "BatchGroup",
    "StaticBatch",
    "batch_static",
    "material_key",
]
