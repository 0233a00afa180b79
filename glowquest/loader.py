"""Loading overworld and interior maps from a directory of JSON files."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from glowquest.config import SCREEN_GRID_H, SCREEN_GRID_W
from glowquest.entities import DialogueOption, EnemyType, ItemType
from glowquest.screen import (
    DoorLink,
    EnemySpawn,
    InteriorDef,
    ItemSpawn,
    NPCSpawn,
    Screen,
    ScreenWarp,
)

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_INTERIOR_PREFIX = "interior:"

DIALOGUE_TABLE: dict[str, list[str]] = {
    "old_man_intro": [
        "It's dangerous to go",
        "alone! Take the sword",
        "by the well.",
    ],
    "merchant_welcome": [
        "Welcome to our village.",
        "The ruins to the south-",
        "east hold great treasure.",
    ],
    "traveller_beware": [
        "Beware the mountain.",
        "Many Moblins lurk",
        "there.",
    ],
    "ghost_ruins": [
        "You've found the",
        "ancient ruins. The",
        "stairs lead deeper...",
    ],
    "villager_house_1": [
        "Please make yourself",
        "at home. The village",
        "is peaceful... for now.",
    ],
    "scholar_house_2": [
        "I've been studying the",
        "ruins. Ancient power",
        "sleeps beneath them.",
    ],
    "tarin_intro": [
        "Yer finally awake!",
        "I'm Tarin. Found ye",
        "washed up on shore.",
    ],
    "tarin_has_sword": [
        "Ah, ye found yer",
        "sword! The beach",
        "can be dangerous...",
    ],
    "tarin_shield": [
        "Here, take this",
        "shield. Ye'll need",
        "it out there.",
    ],
    "marin_singing": [
        "The wind fish in",
        "name only, for it",
        "is neither...",
    ],
    "marin_met": [
        "You remind me of",
        "someone... Please be",
        "careful out there.",
    ],
    "meowmeow_intro": [
        "My BowWow is the",
        "best! Don't get too",
        "close though!",
    ],
    "librarian_lore": [
        "The Wind Fish sleeps",
        "in the Egg atop the",
        "mountains...",
    ],
    "shopkeeper_hello": [
        "Welcome! Take a look",
        "around. I've got",
        "supplies for sale.",
    ],
    "kid_village": [
        "I wanna be an",
        "adventurer when I",
        "grow up!",
    ],
    "villager_east": [
        "The library has old",
        "books about this",
        "island's secrets.",
    ],
    "owl_statue_village": [
        "Head south to find",
        "what the sea washed",
        "ashore...",
    ],
    "beach_hermit": [
        "This shore is called",
        "Toronbo. Many things",
        "wash up here...",
    ],
    "old_man_cave": [
        "This cave is safe.",
        "Rest here before you",
        "venture further.",
    ],
    "phone_hint": [
        "Ring ring! The path",
        "south leads to the",
        "Toronbo Shores.",
    ],
}

_ENEMY_NAMES = {
    "octorok": EnemyType.OCTOROK,
    "moblin": EnemyType.MOBLIN,
    "stalfos": EnemyType.STALFOS,
    "boss": EnemyType.BOSS,
}

_ITEM_NAMES = {
    "heart": ItemType.HEART,
    "rupee": ItemType.RUPEE,
    "key": ItemType.KEY,
    "sword": ItemType.SWORD,
    "heart_container": ItemType.HEART_CONTAINER,
}


@dataclass
class OverworldMeta:
    """Size of the overworld grid and where a new game starts."""

    width: int = 16
    height: int = 16
    start_screen: tuple[int, int] = (8, 8)
    start_pos: tuple[float, float] = (113.0, 113.0)
    start_interior: str = ""


# --- field readers: JSON null counts as absent, wrong types raise TypeError ---


def _lookup(raw: dict, key: str) -> Any:
    if key in raw:
        return raw[key]
    for k, v in raw.items():
        if k.lower() == key.lower():
            return v
    return None


def _obj(value: Any) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError("expected an object")
    return value


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _int(raw: dict, key: str) -> int:
    value = _lookup(raw, key)
    return 0 if value is None else _as_int(value)


def _float(raw: dict, key: str) -> float:
    value = _lookup(raw, key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number")
    return float(value)


def _str(raw: dict, key: str) -> str:
    value = _lookup(raw, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _list(raw: dict, key: str) -> list:
    value = _lookup(raw, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list")
    return value


# --- type resolution ---


def resolve_enemy_type(value: Any) -> int:
    """Enemy type from a number or a name; anything else is an Octorok."""
    if isinstance(value, bool):
        return EnemyType.OCTOROK
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        return _ENEMY_NAMES.get(value, EnemyType.OCTOROK)
    return EnemyType.OCTOROK


def resolve_item_type(value: Any) -> int:
    """Item type from a number or a name; anything else is a heart."""
    if isinstance(value, bool):
        return ItemType.HEART
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        return _ITEM_NAMES.get(value, ItemType.HEART)
    return ItemType.HEART


# --- conversion ---


def _read_tiles(raw: dict, screen: Screen) -> None:
    grid = [[_as_int(v) for v in _obj_list(row)] for row in _list(raw, "tiles")]
    for y, row in enumerate(grid[:SCREEN_GRID_H]):
        for x, value in enumerate(row[:SCREEN_GRID_W]):
            screen.tiles[y][x] = value


def _obj_list(value: Any) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError("expected a list")
    return value


def _enemy_spawns(raw: dict) -> list[EnemySpawn]:
    spawns = []
    for entry in _list(raw, "enemies"):
        e = _obj(entry)
        spawns.append(EnemySpawn(resolve_enemy_type(_lookup(e, "type")), _int(e, "x"), _int(e, "y")))
    return spawns


def _item_spawns(raw: dict) -> list[ItemSpawn]:
    spawns = []
    for entry in _list(raw, "items"):
        i = _obj(entry)
        _str(i, "condition")
        spawns.append(ItemSpawn(resolve_item_type(_lookup(i, "type")), _int(i, "x"), _int(i, "y")))
    return spawns


def _npc_spawn(raw: dict) -> NPCSpawn:
    dialogue = DIALOGUE_TABLE.get(_str(raw, "dialogue_key"))
    spawn = NPCSpawn(
        npc_id=_str(raw, "id"),
        tile_x=_int(raw, "x"),
        tile_y=_int(raw, "y"),
        direction=_int(raw, "dir"),
        name=_str(raw, "name"),
        dialogue=list(dialogue) if dialogue is not None else ["..."],
    )
    for entry in _list(raw, "dialogues"):
        d = _obj(entry)
        lines = DIALOGUE_TABLE.get(_str(d, "key"))
        if lines is None:
            continue
        spawn.conditional_dialogues.append(DialogueOption(_str(d, "condition"), list(lines)))
    return spawn


def _npc_spawns(raw: dict) -> list[NPCSpawn]:
    return [_npc_spawn(_obj(entry)) for entry in _list(raw, "npcs")]


def _warps(raw: dict) -> list[dict]:
    return [_obj(entry) for entry in _list(raw, "warps")]


def _convert_screen(raw: dict) -> Screen:
    screen = Screen()
    _read_tiles(raw, screen)
    screen.enemy_spawns = _enemy_spawns(raw)
    screen.item_spawns = _item_spawns(raw)
    screen.npc_spawns = _npc_spawns(raw)
    screen.warps = [
        ScreenWarp(
            tile_x=_int(w, "x"),
            tile_y=_int(w, "y"),
            target=_str(w, "target"),
            spawn_x=_float(w, "sx"),
            spawn_y=_float(w, "sy"),
            exit_x=_float(w, "ex"),
            exit_y=_float(w, "ey"),
        )
        for w in _warps(raw)
    ]
    return screen


def _convert_interior(raw: dict) -> InteriorDef:
    screen = Screen()
    _read_tiles(raw, screen)
    return InteriorDef(
        interior_id=_str(raw, "id"),
        screen=screen,
        enemy_spawns=_enemy_spawns(raw),
        item_spawns=_item_spawns(raw),
        npc_spawns=_npc_spawns(raw),
        door_links=[
            DoorLink(
                door_tile_x=_int(w, "x"),
                door_tile_y=_int(w, "y"),
                interior_id=_str(w, "target"),
                spawn_x=_float(w, "sx"),
                spawn_y=_float(w, "sy"),
                exit_x=_float(w, "ex"),
                exit_y=_float(w, "ey"),
            )
            for w in _warps(raw)
        ],
    )


def _map_files(directory: Path) -> list[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as err:
        log.warning("loader: failed to read %s: %s", directory, err)
        return []
    return [p for p in entries if not p.is_dir()]


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


# --- public loading functions ---


def load_overworld_meta(maps_dir: PathLike) -> OverworldMeta:
    """Read overworld.json; falls back to a 16x16 default when missing or bad."""
    path = Path(maps_dir) / "overworld.json"
    try:
        raw = _obj(_read_json(path))
        start_screen = _obj(_lookup(raw, "start_screen"))
        start_pos = _obj(_lookup(raw, "start_pos"))
        _obj(_lookup(raw, "regions"))
        return OverworldMeta(
            width=_int(raw, "width"),
            height=_int(raw, "height"),
            start_screen=(_int(start_screen, "x"), _int(start_screen, "y")),
            start_pos=(_float(start_pos, "x"), _float(start_pos, "y")),
            start_interior=_str(raw, "start_interior"),
        )
    except (OSError, ValueError, TypeError) as err:
        log.warning("loader: failed to load %s: %s", path, err)
        return OverworldMeta()


def load_overworld_screens(maps_dir: PathLike) -> dict[tuple[int, int], Screen]:
    """Read every row file under overworld/, keyed by (column, row)."""
    screens: dict[tuple[int, int], Screen] = {}
    for path in _map_files(Path(maps_dir) / "overworld"):
        try:
            raw = _obj(_read_json(path))
            row = _int(raw, "row")
            parsed = []
            for entry in _list(raw, "screens"):
                js = _obj(entry)
                parsed.append(((_int(js, "col"), row), _convert_screen(js)))
        except (OSError, ValueError, TypeError) as err:
            log.warning("loader: failed to load %s: %s", path.name, err)
            continue
        screens.update(parsed)
    return screens


def load_interiors(maps_dir: PathLike) -> dict[str, InteriorDef]:
    """Read every interior file under interiors/, keyed by interior id."""
    interiors: dict[str, InteriorDef] = {}
    for path in _map_files(Path(maps_dir) / "interiors"):
        try:
            raw = _obj(_read_json(path))
            defs = [_convert_interior(_obj(entry)) for entry in _list(raw, "interiors")]
        except (OSError, ValueError, TypeError) as err:
            log.warning("loader: failed to load %s: %s", path.name, err)
            continue
        interiors.update((d.interior_id, d) for d in defs)
    return interiors


def build_door_links(screens: dict[tuple[int, int], Screen]) -> list[DoorLink]:
    """Door links for every "interior:ID" warp on the given screens."""
    links = []
    for (sx, sy), screen in sorted(screens.items()):
        for warp in screen.warps:
            if len(warp.target) > len(_INTERIOR_PREFIX) and warp.target.startswith(_INTERIOR_PREFIX):
                links.append(
                    DoorLink(
                        screen_x=sx,
                        screen_y=sy,
                        door_tile_x=warp.tile_x,
                        door_tile_y=warp.tile_y,
                        interior_id=warp.target[len(_INTERIOR_PREFIX):],
                        spawn_x=warp.spawn_x,
                        spawn_y=warp.spawn_y,
                        exit_x=warp.exit_x,
                        exit_y=warp.exit_y,
                    )
                )
    return links