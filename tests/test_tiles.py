import pytest

from glowquest.tiles import TILE_COUNT, Tile, tile_from_char, tile_props


@pytest.mark.parametrize(
    "char,tile",
    [
        (".", Tile.GRASS),
        ("W", Tile.WALL),
        ("~", Tile.WATER),
        ("T", Tile.TREE),
        ("S", Tile.SAND),
        ("F", Tile.FLOOR),
        (">", Tile.STAIRS),
        ("D", Tile.DOOR_LOCKED),
        ("O", Tile.DOOR_OPEN),
    ],
)
def test_tile_from_char(char, tile):
    assert tile_from_char(char) == tile


def test_unknown_char_is_grass():
    assert tile_from_char("?") == Tile.GRASS


def test_tile_numbering_fixed():
    assert Tile.FENCE_V == 47
    assert TILE_COUNT == len(Tile)
    assert tile_props(Tile.FENCE_V).passable is False
    assert tile_props(Tile.FENCE_V - 1) == tile_props(Tile.FENCE_H)


@pytest.mark.parametrize(
    "tile",
    [Tile.GRASS, Tile.SAND, Tile.FLOOR, Tile.STAIRS, Tile.DOOR_OPEN, Tile.BRIDGE, Tile.ICE, Tile.SPIKES],
)
def test_passable_tiles(tile):
    assert tile_props(tile).passable is True


@pytest.mark.parametrize(
    "tile",
    [Tile.WALL, Tile.TREE, Tile.DOOR_LOCKED, Tile.TORCH, Tile.TORCH_LIT, Tile.LAVA, Tile.PIT, Tile.WATER],
)
def test_solid_tiles(tile):
    assert tile_props(tile).passable is False


def test_water_properties():
    water = tile_props(Tile.WATER)
    assert water.swimmable and water.slow_factor == 0.5
    assert tile_props(Tile.SHALLOW_WATER).slow_factor == 0.6


def test_special_properties():
    assert tile_props(Tile.HEAVY_ROCK).liftable == 2
    assert tile_props(Tile.POT).liftable == 1
    assert tile_props(Tile.CONVEYOR_W).conveyor_dir == 4
    assert tile_props(Tile.CLIFF_E).jump_down and tile_props(Tile.CLIFF_E).jump_dir == 2
    assert tile_props(Tile.LAVA).damaging
    assert tile_props(Tile.BUSH).cuttable
    assert tile_props(Tile.CRACKED_WALL).bombable


def test_unlisted_table_entries_are_solid_defaults():
    props = tile_props(63)
    assert props.passable is False
    assert props.slow_factor == 1.0


@pytest.mark.parametrize("tile", [-1, 64])
def test_out_of_table_raises(tile):
    with pytest.raises(IndexError):
        tile_props(tile)