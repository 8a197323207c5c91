# render/batching.py
"""Static geometry batching.

Merges every static primitive that shares a material key into one combined
primitive, with each member's world transform baked into the vertices. Water
planes animate and are never merged.

StaticBatch holds both representations and toggles between them:
- "batched": merged groups visible, originals hidden
- "original": originals visible, merged groups hidden
Each switch shows the incoming set before hiding the outgoing one, so no
primitive is ever hidden in both at once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from render.geometry import Geometry, Mesh, merge_geometries
from render.scene import StaticScene

logger = logging.getLogger(__name__)

MODE_ORIGINAL = "original"
MODE_BATCHED = "batched"


def material_key(color: int, emissive: int, emissive_intensity: float,
                 cast_shadow: bool, receive_shadow: bool) -> str:
    """Grouping key: primitives with equal keys can share one draw."""
    return f"{color}|{emissive}|{emissive_intensity}|{cast_shadow}|{receive_shadow}"


def mesh_key(mesh: Mesh) -> str:
    m = mesh.material
    return material_key(m.color, m.emissive, m.emissive_intensity, mesh.cast_shadow, mesh.receive_shadow)


@dataclass
class BatchGroup:
    """Members sharing one material key and the primitive they merge into."""
    key: str
    members: List[Mesh]
    merged: Mesh

    @property
    def vertex_count(self) -> int:
        return self.merged.geometry.vertex_count

    @property
    def triangle_count(self) -> int:
        return self.merged.geometry.triangle_count


def group_by_material(meshes: List[Mesh]) -> Dict[str, List[Mesh]]:
    """Bucket meshes by material key, keeping first-seen key order."""
    groups: Dict[str, List[Mesh]] = {}
    for mesh in meshes:
        groups.setdefault(mesh_key(mesh), []).append(mesh)
    return groups


def merge_group(key: str, members: List[Mesh]) -> BatchGroup:
    """Bake each member's transform and merge them into one identity-transform mesh."""
    first = members[0]
    geometry: Geometry = merge_geometries([m.world_geometry() for m in members])
    merged = Mesh(
        geometry,
        first.material,
        cast_shadow=first.cast_shadow,
        receive_shadow=first.receive_shadow,
        tag={"batch_key": key, "members": len(members)},
    )
    return BatchGroup(key, members, merged)


@dataclass
class StaticBatch:
    """Toggle handle over the original and merged representations.

    Attributes:
        originals: Static primitives that were merged
        water: Animated primitives, always visible
        groups: One BatchGroup per material key
    """
    originals: List[Mesh]
    water: List[Mesh]
    groups: List[BatchGroup]
    mode: str = field(default=MODE_ORIGINAL)

    @property
    def merged(self) -> List[Mesh]:
        return [g.merged for g in self.groups]

    def show_original(self) -> None:
        """Show every primitive individually (e.g. for per-tile overlays)."""
        for mesh in self.originals:
            mesh.visible = True
        for mesh in self.merged:
            mesh.visible = False
        self.mode = MODE_ORIGINAL

    def show_batched(self) -> None:
        """Show merged groups only (performance mode)."""
        for mesh in self.merged:
            mesh.visible = True
        for mesh in self.originals:
            mesh.visible = False
        for mesh in self.water:
            mesh.visible = True
        self.mode = MODE_BATCHED

    def toggle(self) -> str:
        if self.mode == MODE_BATCHED:
            self.show_original()
        else:
            self.show_batched()
        return self.mode

    def visible_meshes(self) -> List[Mesh]:
        return [m for m in self.originals + self.merged + self.water if m.visible]

    def original_vertex_count(self) -> int:
        return sum(m.geometry.vertex_count for m in self.originals)

    def batched_vertex_count(self) -> int:
        return sum(g.vertex_count for g in self.groups)

    def original_triangle_count(self) -> int:
        return sum(m.geometry.triangle_count for m in self.originals)

    def batched_triangle_count(self) -> int:
        return sum(g.triangle_count for g in self.groups)

    def draw_calls(self) -> int:
        """Number of visible primitives in the current mode."""
        return len(self.visible_meshes())


def batch_static(scene: StaticScene) -> StaticBatch:
    """Merge a scene's static primitives and switch to the batched view.

    Call after decorations are in the scene; primitives added later are not
    part of any group.
    """
    static = scene.static()
    groups = [merge_group(key, members) for key, members in group_by_material(static).items()]
    batch = StaticBatch(originals=static, water=scene.water(), groups=groups)
    batch.show_batched()
    logger.debug(
        "Batched %d static primitives into %d groups (%d water primitives left separate)",
        len(static), len(groups), len(batch.water),
    )
    return batch
