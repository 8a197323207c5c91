from render.scene import build_scene, tile_meshes
from world.terrain import TileType, classify_tile


def test_water_tiles_become_animated_planes(grid):
    scene = build_scene(grid)
    water = scene.water()
    assert len(water) == len(grid.water_tiles())
    for mesh in water:
        assert mesh.material.transparent
        assert mesh.geometry.vertex_count == 81
    assert len(scene.static()) + len(water) == len(scene.meshes())


def test_bridge_primitive(grid):
    bridges = [m for m in build_scene(grid).terrain if m.tag.get("tile_type") == TileType.BRIDGE]
    assert len(bridges) == 1
    assert bridges[0].cast_shadow and bridges[0].receive_shadow
    assert bridges[0].tag["row"] == grid.bridge.row


def test_peaks_carry_snow_caps():
    peak = classify_tile(0, 0, "mountain", False)
    meshes = tile_meshes(peak, 0, 0, 14)
    assert [m.tag["tile_type"] for m in meshes] == [TileType.MOUNTAIN_PEAK, "snow_cap"]
    slope = classify_tile(13, 13, "mountain", False)
    assert len(tile_meshes(slope, 13, 13, 14)) == 1


def test_decoration_parts(settled_world):
    scene = build_scene(settled_world.grid, settled_world.decorations)
    assert len(scene.decorations) >= len(settled_world.decorations)
    assert all(m.tag["decoration"] for m in scene.decorations)


def test_scene_is_deterministic(settled_world):
    a = build_scene(settled_world.grid, settled_world.decorations)
    b = build_scene(settled_world.grid, settled_world.decorations)
    assert len(a.meshes()) == len(b.meshes())
    for ma, mb in zip(a.meshes(), b.meshes()):
        assert (ma.geometry.positions == mb.geometry.positions).all()
        assert (ma.matrix == mb.matrix).all()
