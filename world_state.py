# world_state.py
"""World state: the owned aggregate behind the public world API.

A WorldState owns one generated grid, its site registry, its decorations and
(once requested) the static batch. Collaborators only see this surface:
- tile_at / height_at / biome_at for queries
- find_site / commit for structure placement
- add_decorations / decorations_near for scenery
- batch_static for the display adapter
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from config import GRID
from render.batching import StaticBatch, batch_static
from render.scene import StaticScene, build_scene
from world.decorations import Decoration, decorations_near, scatter_decorations
from world.generation import generate_grid
from world.grid import WorldGrid
from world.sites import Placement, Site, SiteAllocator
from world.terrain import TileRecord

logger = logging.getLogger(__name__)


@dataclass
class WorldState:
    """One world and everything placed on it during a session."""
    grid: WorldGrid
    seed: Optional[int] = None
    sites: SiteAllocator = field(init=False)
    decorations: List[Decoration] = field(default_factory=list)
    decorated: bool = False
    scene: Optional[StaticScene] = None
    batch: Optional[StaticBatch] = None

    def __post_init__(self) -> None:
        self.sites = SiteAllocator(self.grid)

    @classmethod
    def create(cls, seed: Optional[int] = None, size: int = GRID) -> "WorldState":
        """Generate a new world.

        Args:
            seed: Integer seed for a reproducible world; None for a fresh one
            size: Grid side length
        """
        rng = random.Random(seed)
        return cls(grid=generate_grid(rng, size), seed=seed)

    # =========================================================================
    # Queries
    # =========================================================================

    def tile_at(self, x: float, z: float) -> Optional[TileRecord]:
        return self.grid.tile_at(x, z)

    def height_at(self, x: float, z: float) -> float:
        return self.grid.height_at(x, z)

    def biome_at(self, x: float, z: float) -> str:
        return self.grid.biome_at(x, z)

    # =========================================================================
    # Structures
    # =========================================================================

    def find_site(self) -> Optional[Site]:
        return self.sites.find_site()

    def commit(self, x: int, z: int) -> Placement:
        return self.sites.commit(x, z)

    def place_structures(self, count: int) -> List[Placement]:
        """Run find_site/commit cycles until count structures are placed or no site is left."""
        placed = []
        for _ in range(count):
            site = self.find_site()
            if site is None:
                break
            placed.append(self.commit(site.x, site.z))
        return placed

    # =========================================================================
    # Scenery
    # =========================================================================

    def add_decorations(self) -> List[Decoration]:
        """Scatter decorations once, after structures have settled.

        A second call keeps the first pass and logs a warning. A static batch
        built before this call is dropped, and the next batch_static() rebuilds
        it with the decorations included.
        """
        if self.decorated:
            logger.warning("Decorations already scattered; keeping the first pass")
            return self.decorations
        self.decorations = scatter_decorations(self.grid, self.sites.occupied)
        self.decorated = True
        if self.batch is not None:
            logger.warning("Static batch was built before decorations; discarding it")
            self.scene = None
            self.batch = None
        return self.decorations

    def decorations_near(self, x: int, z: int, radius: int) -> List[Decoration]:
        return decorations_near(self.decorations, x, z, radius)

    def batch_static(self) -> StaticBatch:
        """Build the scene and merge its static primitives (cached)."""
        if self.batch is None:
            self.scene = build_scene(self.grid, self.decorations)
            self.batch = batch_static(self.scene)
        return self.batch
