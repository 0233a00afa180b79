"""Tile types and the per-tile property table."""

from dataclasses import dataclass
from enum import IntEnum


class Tile(IntEnum):
    """Every tile that can appear on a screen."""

    GRASS = 0
    WALL = 1
    WATER = 2
    TREE = 3
    SAND = 4
    FLOOR = 5
    STAIRS = 6
    DOOR_LOCKED = 7
    DOOR_OPEN = 8

    # Terrain
    SHALLOW_WATER = 9
    CLIFF_N = 10
    CLIFF_S = 11
    CLIFF_E = 12
    CLIFF_W = 13
    BRIDGE = 14
    PIT = 15

    # Interactive
    BUSH = 16
    ROCK = 17
    HEAVY_ROCK = 18
    POT = 19
    SIGNPOST = 20
    CHEST = 21
    CHEST_OPEN = 22
    OWL_STATUE = 23
    KEY_BLOCK = 24

    # Dungeon
    CRACKED_WALL = 25
    CONVEYOR_N = 26
    CONVEYOR_S = 27
    CONVEYOR_E = 28
    CONVEYOR_W = 29
    SPIKES = 30
    LAVA = 31
    ICE = 32
    SWITCH_OFF = 33
    SWITCH_ON = 34
    WARP_TILE = 35
    BOSS_LOCKED = 36
    BOMBABLE = 37
    TORCH = 38
    TORCH_LIT = 39

    # Decoration
    GRASS_FLOWER = 40
    PATH_H = 41
    PATH_V = 42
    HOUSE_FRONT = 43
    ROOF = 44
    WINDOW = 45
    FENCE_H = 46
    FENCE_V = 47


TILE_COUNT = 48

_CHAR_TILES = {
    ".": Tile.GRASS,
    "W": Tile.WALL,
    "~": Tile.WATER,
    "T": Tile.TREE,
    "S": Tile.SAND,
    "F": Tile.FLOOR,
    ">": Tile.STAIRS,
    "D": Tile.DOOR_LOCKED,
    "O": Tile.DOOR_OPEN,
}


def tile_from_char(c: str) -> Tile:
    """Tile for a map character; unknown characters become grass."""
    return _CHAR_TILES.get(c, Tile.GRASS)


@dataclass(frozen=True)
class TileProperties:
    """How a tile behaves when walked on or interacted with."""

    passable: bool = False
    swimmable: bool = False
    cuttable: bool = False
    liftable: int = 0  # 0 = no, 1 = bracelet L1, 2 = bracelet L2
    bombable: bool = False
    damaging: bool = False
    slow_factor: float = 1.0
    slippery: bool = False
    conveyor_dir: int = 0  # 0 = none, 1 = N, 2 = S, 3 = E, 4 = W
    jump_down: bool = False
    jump_dir: int = 0  # 0 = N, 1 = S, 2 = E, 3 = W


_TABLE_SIZE = 64
_SOLID = TileProperties()
_GROUND = TileProperties(passable=True)

_SPECIAL: dict[int, TileProperties] = {
    Tile.GRASS: _GROUND,
    Tile.SAND: _GROUND,
    Tile.FLOOR: _GROUND,
    Tile.STAIRS: _GROUND,
    Tile.DOOR_OPEN: _GROUND,
    Tile.BRIDGE: _GROUND,
    Tile.GRASS_FLOWER: _GROUND,
    Tile.PATH_H: _GROUND,
    Tile.PATH_V: _GROUND,
    Tile.CHEST_OPEN: _GROUND,
    Tile.WARP_TILE: _GROUND,
    Tile.SWITCH_OFF: _GROUND,
    Tile.SWITCH_ON: _GROUND,
    Tile.WATER: TileProperties(swimmable=True, slow_factor=0.5),
    Tile.SHALLOW_WATER: TileProperties(swimmable=True, slow_factor=0.6),
    Tile.BUSH: TileProperties(cuttable=True),
    Tile.ROCK: TileProperties(liftable=1),
    Tile.HEAVY_ROCK: TileProperties(liftable=2),
    Tile.POT: TileProperties(liftable=1),
    Tile.CRACKED_WALL: TileProperties(bombable=True),
    Tile.BOMBABLE: TileProperties(bombable=True),
    Tile.CONVEYOR_N: TileProperties(passable=True, conveyor_dir=1),
    Tile.CONVEYOR_S: TileProperties(passable=True, conveyor_dir=2),
    Tile.CONVEYOR_E: TileProperties(passable=True, conveyor_dir=3),
    Tile.CONVEYOR_W: TileProperties(passable=True, conveyor_dir=4),
    Tile.SPIKES: TileProperties(passable=True, damaging=True),
    Tile.LAVA: TileProperties(damaging=True),
    Tile.ICE: TileProperties(passable=True, slippery=True),
    Tile.CLIFF_N: TileProperties(jump_down=True, jump_dir=0),
    Tile.CLIFF_S: TileProperties(jump_down=True, jump_dir=1),
    Tile.CLIFF_E: TileProperties(jump_down=True, jump_dir=2),
    Tile.CLIFF_W: TileProperties(jump_down=True, jump_dir=3),
}

_TILE_PROPS = tuple(_SPECIAL.get(i, _SOLID) for i in range(_TABLE_SIZE))


def tile_props(tile: int) -> TileProperties:
    """Properties of a tile; anything not listed is solid."""
    if not 0 <= tile < _TABLE_SIZE:
        raise IndexError(f"tile {tile} is outside the property table")
    return _TILE_PROPS[tile]