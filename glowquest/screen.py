"""Screens, their spawn points and warps, and interior definitions."""

from dataclasses import dataclass, field

from glowquest.config import SCREEN_GRID_H, SCREEN_GRID_W
from glowquest.entities import DialogueOption
from glowquest.tiles import Tile, tile_from_char


@dataclass
class EnemySpawn:
    kind: int  # an EnemyType value
    tile_x: int
    tile_y: int


@dataclass
class ItemSpawn:
    kind: int  # an ItemType value
    tile_x: int
    tile_y: int


@dataclass
class NPCSpawn:
    npc_id: str
    tile_x: int
    tile_y: int
    direction: int = 0  # a Direction value
    name: str = ""
    dialogue: list[str] = field(default_factory=list)
    conditional_dialogues: list[DialogueOption] = field(default_factory=list)


@dataclass
class ScreenWarp:
    """A door or stairs tile leading elsewhere."""

    tile_x: int
    tile_y: int
    target: str  # "interior:ID", "overworld" or "dungeon:ID"
    spawn_x: float = 0.0
    spawn_y: float = 0.0
    exit_x: float = 0.0
    exit_y: float = 0.0


def _grass_grid() -> list[list[int]]:
    return [[Tile.GRASS] * SCREEN_GRID_W for _ in range(SCREEN_GRID_H)]


@dataclass
class Screen:
    """One screen of tiles, indexed as tiles[y][x]."""

    tiles: list[list[int]] = field(default_factory=_grass_grid)
    enemy_spawns: list[EnemySpawn] = field(default_factory=list)
    item_spawns: list[ItemSpawn] = field(default_factory=list)
    npc_spawns: list[NPCSpawn] = field(default_factory=list)
    warps: list[ScreenWarp] = field(default_factory=list)

    def load_from_string(self, data: str) -> None:
        """Fill tiles from newline-separated rows of map characters."""
        for row_tiles, row in zip(self.tiles, data.strip().split("\n")):
            for x, ch in enumerate(row[:SCREEN_GRID_W]):
                row_tiles[x] = tile_from_char(ch)

    def tile_at(self, gx: int, gy: int) -> int:
        """Tile at a grid position; outside the screen counts as wall."""
        if not (0 <= gx < SCREEN_GRID_W and 0 <= gy < SCREEN_GRID_H):
            return Tile.WALL
        return self.tiles[gy][gx]


@dataclass
class DoorLink:
    """Connects a door tile to an interior, with entry and exit positions."""

    screen_x: int = 0
    screen_y: int = 0
    door_tile_x: int = 0
    door_tile_y: int = 0
    interior_id: str = ""
    spawn_x: float = 0.0
    spawn_y: float = 0.0
    exit_x: float = 0.0
    exit_y: float = 0.0


@dataclass
class InteriorDef:
    interior_id: str
    screen: Screen = field(default_factory=Screen)
    enemy_spawns: list[EnemySpawn] = field(default_factory=list)
    item_spawns: list[ItemSpawn] = field(default_factory=list)
    npc_spawns: list[NPCSpawn] = field(default_factory=list)
    door_links: list[DoorLink] = field(default_factory=list)