from config import BIOME_LIST, GRID
from world.biomes import BIOME_TYPES
from world.terrain import PALETTE, TileType, classify_tile

EXPECTED_TYPES = {
    "meadow": {TileType.GRASS},
    "forest": {TileType.GRASS},
    "desert": {TileType.SAND},
    "mountain": {TileType.MOUNTAIN, TileType.MOUNTAIN_PEAK},
}


def test_classification_matches_inputs():
    for gx in range(GRID):
        for gz in range(GRID):
            for biome in BIOME_LIST:
                land = classify_tile(gx, gz, biome, False)
                assert land.type in EXPECTED_TYPES[biome], f"{biome} at ({gx},{gz}) -> {land.type}"
                assert land.biome == biome
                water = classify_tile(gx, gz, biome, True)
                assert water.type == TileType.WATER


def test_water_tile_record():
    tile = classify_tile(4, 9, "desert", True)
    assert tile.height == 0.08
    assert tile.transparent is True
    assert tile.opacity == 0.78
    assert tile.color in (PALETTE["water"], PALETTE["waterDeep"])


def test_land_tiles_are_opaque():
    tile = classify_tile(4, 9, "meadow", False)
    assert tile.transparent is False
    assert tile.opacity == 1.0


def test_outer_ring_mountain_is_peak():
    tile = classify_tile(0, 0, "mountain", False)
    assert tile.type == TileType.MOUNTAIN_PEAK
    assert tile.height >= 0.25 + 1.1


def test_peak_ring_boundary():
    assert classify_tile(2, 10, "mountain", False).type == TileType.MOUNTAIN_PEAK
    assert classify_tile(3, 10, "mountain", False).type == TileType.MOUNTAIN


def test_inland_mountain_height():
    tile = classify_tile(13, 13, "mountain", False)
    assert tile.type == TileType.MOUNTAIN
    assert 0.25 <= tile.height < 0.40


def test_mountain_rises_toward_edge():
    inland = classify_tile(13, 13, "mountain", False).height
    rim = classify_tile(0, 13, "mountain", False).height
    assert rim > inland + 0.9


def test_lowland_height_bands():
    for gx in range(GRID):
        for gz in range(GRID):
            meadow = classify_tile(gx, gz, "meadow", False)
            assert 0.12 <= meadow.height < 0.18
            desert = classify_tile(gx, gz, "desert", False)
            assert 0.10 <= desert.height < 0.14


def test_shades_alternate_within_biome():
    colors = {classify_tile(gx, 5, "forest", False).color for gx in range(GRID)}
    assert colors == {PALETTE["forestGrass"], PALETTE["forestGrassAlt"]}


def test_unknown_biome_is_plain_grass():
    tile = classify_tile(5, 5, "swamp", False)
    assert tile.type == TileType.GRASS
    assert tile.height == 0.15
    assert tile.color == PALETTE["grass"]


def test_classification_is_pure():
    assert classify_tile(7, 19, "forest", False) == classify_tile(7, 19, "forest", False)


def test_lowland_tile_type_comes_from_biome_table():
    for biome in ("meadow", "forest", "desert"):
        assert classify_tile(6, 6, biome, False).type == BIOME_TYPES[biome].tile_type
